from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from app.clients.completion import CompletionClient, GroqCompletionClient
from app.core.config import Settings
from app.services.chat import ChatResponder
from app.services.contact import ContactService


@dataclass(frozen=True)
class ServiceContainer:
    settings: Settings
    chat_responder: ChatResponder
    contact_service: ContactService


def build_container(
    settings: Settings, completion_client: CompletionClient | None = None
) -> ServiceContainer:
    client = completion_client or GroqCompletionClient(settings)
    return ServiceContainer(
        settings=settings,
        chat_responder=ChatResponder(client),
        contact_service=ContactService(),
    )


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).settings


def get_chat_responder(request: Request) -> ChatResponder:
    return get_container(request).chat_responder


def get_contact_service(request: Request) -> ContactService:
    return get_container(request).contact_service
