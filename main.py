#!/usr/bin/env python3
"""
ucsrename - Rename audio files using the Universal Category System filename pattern.

Prompts for the UCS filename fields, picks the CatID with fzf and renames the
file in place, keeping its extension.
"""

from ucs_rename.interface.cli import app

if __name__ == "__main__":
    app()
