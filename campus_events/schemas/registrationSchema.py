from datetime import datetime

from campus_events.schemas.base import FROZEN, CamelModel


class Registration(CamelModel):
    model_config = FROZEN

    id: int
    event_id: int
    user_id: int
    ticket_code: str
    registered_at: datetime
