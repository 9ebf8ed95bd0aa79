"""
This package contains all modules related to parsing and decoding data
received from the PipeWire monitor stream.

Sub-packages handle specific concerns:

- ``events``: Event envelope, info payload, property dictionary and
  parameter block models, plus the removal classifier and typed projections.
"""
