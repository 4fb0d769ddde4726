#!/usr/bin/env python3
"""Hugging Face Spaces entry point for the Carnavalito front-end."""

from carnavalito.app.app import main

if __name__ == "__main__":
    main()
