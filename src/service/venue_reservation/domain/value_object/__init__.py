"""Venue Reservation Domain Value Objects"""

from src.service.venue_reservation.domain.value_object.resource_ref import ResourceRef

__all__ = ['ResourceRef']
