"""SkyParty Domain Layer."""
