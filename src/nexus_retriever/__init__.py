"""Retrieve shared libraries from a Maven repository and unpack them locally."""
