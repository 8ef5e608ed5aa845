"""User interfaces for vlcremote."""
