"""Response builders turning handler output into outbound messages."""

from typing import Any

from brewbot.core.commands.base import ResponseIntent, Scope


class ResponseBuilder:
    """Builds plain-text response intents."""

    def build_text_response(self, text: str) -> ResponseIntent:
        return ResponseIntent(text=text)


class SlackResponseBuilder(ResponseBuilder):
    """Renders response intents as Slack slash-command payloads."""

    def render(
        self, intent: ResponseIntent | None, scope: Scope
    ) -> dict[str, Any] | None:
        """
        Render an intent as a Slack response body.

        Args:
            intent: Handler result; None means no reply
            scope: Scope of the command being answered

        Returns:
            Slack JSON payload, or None when there is nothing to send
        """
        if intent is None:
            return None
        response_type = "in_channel" if scope is Scope.PUBLIC else "ephemeral"
        return {"response_type": response_type, "text": intent.text}
