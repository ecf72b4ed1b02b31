from __future__ import annotations

import logging

from app.clients.completion import CompletionClient
from app.core.errors import RequestValidationFailure
from app.models.completion import ChatMessage, CompletionSuccess
from app.schemas.chat import ChatReply
from app.services.portfolio import CONTACT_EMAIL, CONTACT_WHATSAPP

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "Message is required"
CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again or contact me directly."

SYSTEM_PROMPT = (
    "You are a helpful AI assistant on arunregmi.com.np. Be concise and helpful. "
    f"If asked for contact, use only: Email: {CONTACT_EMAIL} and WhatsApp: {CONTACT_WHATSAPP}. "
    "Do not mention LinkedIn. "
    "You are representing Arun Regmi, a web developer from Nepal."
)

# First keyword found in the lowercased message wins, so order matters.
FALLBACK_RULES: tuple[tuple[str, str], ...] = (
    (
        "services",
        "I offer web development, Firebase systems, UI/UX design, GitHub hosting, "
        "domain & DNS setup, and custom online tools development.",
    ),
    (
        "projects",
        "I've built an Online Tools Suite with 17+ tools, an E-commerce Platform, "
        "and an AI Content Generator. You can check out the tools page!",
    ),
    (
        "contact",
        f"You can reach me via email at {CONTACT_EMAIL} or WhatsApp at {CONTACT_WHATSAPP}. "
        "The links are in the contact section!",
    ),
    (
        "technologies",
        "I work with HTML/CSS, JavaScript, React/Vue, Firebase, Node.js, Express, GitHub, "
        "Cloudflare, and focus on UI/UX, performance, and SEO.",
    ),
    (
        "price",
        "For pricing details, please contact me directly via email or WhatsApp with your "
        "project requirements. I provide custom quotes based on project scope.",
    ),
    (
        "experience",
        "I'm a web developer focused on creating fast, modern, and accessible web experiences "
        "with expertise in frontend and backend technologies.",
    ),
)

DEFAULT_FALLBACK_REPLY = (
    "Thank you for your message! For specific inquiries about my services, projects, "
    "or to discuss your project needs, please contact me directly at "
    f"{CONTACT_EMAIL} or WhatsApp {CONTACT_WHATSAPP}."
)


def fallback_reply(
    message: str,
    rules: tuple[tuple[str, str], ...] = FALLBACK_RULES,
    default: str = DEFAULT_FALLBACK_REPLY,
) -> str:
    lowered = message.lower()
    for keyword, reply in rules:
        if keyword in lowered:
            return reply
    return default


def _build_messages(message: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=message),
    ]


class ChatResponder:
    def __init__(self, completion_client: CompletionClient) -> None:
        self._logger = logger
        self._completion_client = completion_client

    def resolve(self, message: str | None) -> ChatReply:
        """Answer a visitor message: remote completion first, keyword rules second.

        Raises:
            RequestValidationFailure: if the message is missing or blank.
        """
        if not message or not message.strip():
            raise RequestValidationFailure(MESSAGE_REQUIRED)

        try:
            result = self._completion_client.complete(_build_messages(message))
        except Exception:  # noqa: BLE001
            self._logger.exception("AI chat failed")
            return ChatReply(success=False, message=CHAT_ERROR_MESSAGE)

        if isinstance(result, CompletionSuccess):
            return ChatReply(success=True, response=result.text)

        self._logger.info("Completion unavailable (%s), using fallback reply", result.reason)
        return ChatReply(success=True, response=fallback_reply(message))
