from stayquote.models.reservation_lead import ReservationLead

__all__ = [
    "ReservationLead",
]
