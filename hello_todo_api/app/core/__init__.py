"""Configuration, logging and low level helpers shared by the app."""
