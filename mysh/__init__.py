"""A small command shell with env, setenv, unsetenv and exit built in."""

__version__ = "0.1.0"