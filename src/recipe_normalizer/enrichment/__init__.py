"""Rule-based metadata inference."""
