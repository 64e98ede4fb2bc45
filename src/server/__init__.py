"""HTTP adapter exposing the floor call store."""
