"""Booking core for an on-demand cleaning and moving service.

Two engines live here: the page-builder block validator
(``cleaning_booking.blocks``) and booking admission plus cleaner
assignment (``cleaning_booking.scheduling``).
"""
