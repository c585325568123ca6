"""SkyParty Application Layer."""
