"""Application layer wiring the detector into chat replies and the demo UI."""
