"""Console rendering for the demo harness."""
