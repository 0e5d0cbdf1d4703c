#!/usr/bin/env python3
"""Hugging Face Spaces entry point for the haiku detector demo."""

from haiku_detector.app.app import main


if __name__ == "__main__":
    main()
