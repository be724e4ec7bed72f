"""Terminal front end for the WalkMate client."""
