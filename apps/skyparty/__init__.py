"""SkyParty game backend service."""
