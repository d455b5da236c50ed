"""
Real-time salary ticker.

The engine package is pure calculation (no clock, no storage); everything
else wires it to a settings file, a quote service and the console.
"""
