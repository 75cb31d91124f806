"""Core building blocks shared by the installer steps."""
