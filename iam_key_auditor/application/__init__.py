"""Application layer - Use cases and the ports they depend on."""
