"""Configuration package for vlcremote."""
