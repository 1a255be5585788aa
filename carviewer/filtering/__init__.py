"""
Filter engine.

Responsibilities:
- Apply manufacturer, category, drivetrain, transmission-class and
  horsepower-range predicates to a catalog snapshot.
- Record a soft interest signal for every model that matches.
"""
