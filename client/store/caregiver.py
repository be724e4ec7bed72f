"""
Caregiver state container.

The patients a caregiver watches, their last known locations and the raw
beacon fixes behind them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class PatientStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SOS = "sos"


class Location(BaseModel):
    latitude: float
    longitude: float
    timestamp: datetime


class WatchedPatient(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None
    last_seen: datetime
    current_location: Optional[Location] = None
    status: PatientStatus = PatientStatus.INACTIVE
    battery_level: int = Field(default=0, ge=0, le=100)
    current_speed: Optional[float] = None


class BeaconLocation(BaseModel):
    id: str
    patient_id: str
    latitude: float
    longitude: float
    timestamp: datetime
    signal_strength: int


class CaregiverState(BaseModel):
    """Caregiver state with its setters."""

    patients: list[WatchedPatient] = Field(default_factory=list)
    selected_patient_id: Optional[str] = None
    beacon_locations: list[BeaconLocation] = Field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None
    is_live_tracking: bool = False

    def set_patients(self, patients: list[WatchedPatient]) -> None:
        self.patients = patients

    def select_patient(self, patient_id: str) -> None:
        self.selected_patient_id = patient_id

    def update_patient_location(
        self,
        patient_id: str,
        location: Optional[Location],
        status: PatientStatus,
        battery_level: int,
        speed: Optional[float] = None,
    ) -> None:
        """Record a fresh fix for a patient. Unknown patients are ignored."""
        for patient in self.patients:
            if patient.id == patient_id:
                patient.current_location = location
                patient.status = status
                patient.battery_level = battery_level
                patient.current_speed = speed
                patient.last_seen = datetime.now(timezone.utc)
                return

    def add_beacon_location(self, beacon: BeaconLocation) -> None:
        self.beacon_locations.append(beacon)

    def set_beacon_locations(self, beacons: list[BeaconLocation]) -> None:
        self.beacon_locations = beacons

    def start_live_tracking(self) -> None:
        self.is_live_tracking = True

    def stop_live_tracking(self) -> None:
        self.is_live_tracking = False

    def set_loading(self, is_loading: bool) -> None:
        self.is_loading = is_loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
