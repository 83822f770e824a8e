"""
Orchestration layer.

Holds the trace/pacing collaborators, the payment processor that runs
the selected payment strategy, and the facade that places a complete
order in one call.
"""
