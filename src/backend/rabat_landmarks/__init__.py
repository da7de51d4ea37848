"""Backend API for the Rabat landmarks map and VR tour."""
