"""
File-backed persistence for the command arsenal.

This package is responsible for:
* Locating the config directory and the default data file under the user's home.
* Reading and writing the small config document that names the active data file.
* Reading and writing the command store document (all groups and their commands).
"""
