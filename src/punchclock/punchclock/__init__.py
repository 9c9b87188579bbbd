"""Punchclock package.

Feature modules (punches, schedules, worktime, reports) with a thin Flask
controller layer on top of service/repository layers. The ``worktime``
package holds the pure reconciliation engine.
"""
