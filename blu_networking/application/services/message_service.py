"""Member messaging service."""

from typing import List

from blu_networking.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    ForbiddenException,
)
from blu_networking.domain.models.member_message import MemberMessage
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.message import MessageCreate


def send_message(
    repo: MessageRepository, user_repo: UserRepository, sender: User, body: MessageCreate
) -> MemberMessage:
    recipient = user_repo.get_by_id(body.to_user_id)
    if recipient is None:
        raise EntityNotFoundException("Recipient not found")
    if recipient.id == sender.id:
        raise BusinessRuleViolationException("Cannot send a message to yourself")

    chapter_id = sender.chapter_id or recipient.chapter_id
    if chapter_id is None:
        raise BusinessRuleViolationException("A chapter is required to send messages")

    return repo.create({
        "from_user_id": sender.id,
        "to_user_id": recipient.id,
        "chapter_id": chapter_id,
        "subject": body.subject,
        "message": body.message,
    })


def list_messages(repo: MessageRepository, user: User) -> List[MemberMessage]:
    return repo.list_for_user(user.id)


def list_chapter_messages(repo: MessageRepository, user: User) -> List[MemberMessage]:
    if user.chapter_id is None:
        return []
    return repo.list_by_chapter(user.chapter_id)


def get_conversation(repo: MessageRepository, user_repo: UserRepository, user: User, other_user_id: int) -> List[MemberMessage]:
    if user_repo.get_by_id(other_user_id) is None:
        raise EntityNotFoundException("User not found")
    return repo.list_between(user.id, other_user_id)


def mark_read(repo: MessageRepository, user: User, message_id: int) -> MemberMessage:
    message = repo.get_by_id(message_id)
    if message is None:
        raise EntityNotFoundException("Message not found")
    if message.to_user_id != user.id:
        raise ForbiddenException("Only the recipient can mark a message as read")
    return repo.mark_read(message)
