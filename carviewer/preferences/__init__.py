"""
Preference package.

Responsibilities:
- Keep the process-wide model-name -> interest-weight table.
- Load it from and persist it to the durable ``<name>,<weight>`` record.
- Reorder snapshot models by observed interest.
"""
