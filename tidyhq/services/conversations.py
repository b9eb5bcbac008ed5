"""Inbox view: one row per client with the latest message and the unread inbound count."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tidyhq.models.message import Message


def get_conversations(db: Session) -> list[dict]:
    ranked = select(
        Message.id.label("message_id"),
        func.row_number()
        .over(partition_by=Message.client_id, order_by=(Message.sent_at.desc(), Message.created_at.desc()))
        .label("position"),
    ).subquery()

    latest = (
        db.query(Message)
        .join(ranked, ranked.c.message_id == Message.id)
        .filter(ranked.c.position == 1)
        .order_by(Message.sent_at.desc())
        .all()
    )

    unread_rows = (
        db.query(Message.client_id, func.count(Message.id))
        .filter(Message.direction == "inbound", Message.status != "read")
        .group_by(Message.client_id)
        .all()
    )
    unread = {client_id: count for client_id, count in unread_rows}

    return [
        {"client_id": message.client_id, "last_message": message, "unread_count": unread.get(message.client_id, 0)}
        for message in latest
    ]
