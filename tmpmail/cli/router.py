"""Routes CLI commands to feature modules."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console

from tmpmail.core.models import EmailAddress, RenderFormat
from tmpmail.core.provider import ProviderClient
from tmpmail.core.session import SessionStore
from tmpmail.features.identity import AddressManager, IdentityDisplay
from tmpmail.features.inbox import InboxDisplay, InboxService
from tmpmail.features.view import MessageDisplay, MessageRenderer
from tmpmail.utils.config import AppConfig
from tmpmail.utils.errors import NotFoundError
from tmpmail.utils.logging import get_logger, log_call
from tmpmail.utils.system import check_dependencies, copy_to_clipboard

logger = get_logger(__name__)


@dataclass
class MailboxContext:
    """Components wired together for one invocation."""

    config: AppConfig
    provider: ProviderClient
    store: SessionStore
    addresses: AddressManager
    inbox: InboxService
    renderer: MessageRenderer

    @classmethod
    def build(cls, config: AppConfig, provider: Optional[ProviderClient] = None) -> "MailboxContext":
        provider = provider or ProviderClient(config)
        store = SessionStore(config.session_dir)
        return cls(
            config=config,
            provider=provider,
            store=store,
            addresses=AddressManager(provider, store),
            inbox=InboxService(provider),
            renderer=MessageRenderer(provider, store),
        )


class CommandRouter:
    """Routes commands to the identity, inbox and view features."""

    def __init__(self, context: MailboxContext, console: Optional[Console] = None):
        self.context = context
        self.identity_display = IdentityDisplay(console)
        self.inbox_display = InboxDisplay(console)
        self.message_display = MessageDisplay(context.config.browser, console)

    @property
    def render_format(self) -> RenderFormat:
        return RenderFormat.TEXT if self.context.config.raw_text else RenderFormat.HTML

    def required_tools(self, command: str) -> List[str]:
        """External commands an invocation will run."""
        if command == "copy":
            return [self.context.config.clipboard_cmd]
        if command in ("view", "recent") and self.render_format is RenderFormat.HTML:
            return [self.context.config.browser]
        return []

    @log_call
    def route(self, command: str, args: Optional[Dict[str, Any]] = None) -> None:
        """Route command to feature.

        Raises:
            ValueError: If command is unknown
            DependencyMissingError: Before any network activity, if a
                needed external tool is not installed
        """
        if args is None:
            args = {}

        handler = self._get_handler(command)
        if not handler:
            raise ValueError(f"Unknown command: {command}")

        check_dependencies(self.required_tools(command))

        try:
            handler(args)
        except Exception as e:
            logger.debug(f"Command '{command}' failed: {e}")
            raise

    def _get_handler(self, command: str) -> Optional[Callable[[Dict[str, Any]], None]]:
        handlers = {
            "list": self._handle_list,
            "domains": self._handle_domains,
            "generate": self._handle_generate,
            "copy": self._handle_copy,
            "recent": self._handle_recent,
            "recent_body": self._handle_recent_body,
            "view": self._handle_view,
        }
        return handlers.get(command)

    ## Identity

    def _handle_domains(self, args: Dict[str, Any]) -> None:
        self.identity_display.show_domains(self.context.addresses.list_domains())

    def _handle_generate(self, args: Dict[str, Any]) -> None:
        custom = args.get("generate")
        if custom:
            address = self.context.addresses.generate_from_string(custom)
        else:
            address = self.context.addresses.generate()
        self.identity_display.show_address(address)

    def _handle_copy(self, args: Dict[str, Any]) -> None:
        address = self.context.addresses.ensure_identity()
        copy_to_clipboard(self.context.config.clipboard_cmd, address.address)

    ## Inbox

    def _handle_list(self, args: Dict[str, Any]) -> None:
        address = self.context.addresses.ensure_identity()
        messages = self.context.inbox.list(address)
        self.inbox_display.display(address, messages)

    ## Viewing

    def _view(self, address: EmailAddress, message_id: int) -> None:
        document = self.context.renderer.view(address, message_id, self.render_format)
        self.message_display.show(document, self.context.store.document_path)

    def _recent_id(self, address: EmailAddress) -> int:
        message_id = self.context.inbox.most_recent_id(address)
        if message_id is None:
            raise NotFoundError("Message not found", details={"reason": "inbox is empty"})
        return message_id

    def _handle_view(self, args: Dict[str, Any]) -> None:
        address = self.context.addresses.ensure_identity()
        self._view(address, int(args["id"]))

    def _handle_recent(self, args: Dict[str, Any]) -> None:
        address = self.context.addresses.ensure_identity()
        self._view(address, self._recent_id(address))

    def _handle_recent_body(self, args: Dict[str, Any]) -> None:
        address = self.context.addresses.ensure_identity()
        detail = self.context.provider.fetch_message(address, self._recent_id(address))
        self.message_display.show_markup(self.context.renderer.select_body(detail))
