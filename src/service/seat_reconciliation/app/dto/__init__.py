"""Seat Reconciliation Application DTOs"""

from src.service.seat_reconciliation.app.dto.event_ref import EventRef


__all__ = ['EventRef']
