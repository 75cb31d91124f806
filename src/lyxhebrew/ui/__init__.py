"""User interfaces for the installer."""
