"""
LLM interaction logging.

Provides detailed logging of LLM requests and responses for debugging,
cost tracking, and auditing purposes.
"""

import json
import logging
import logging.handlers
import time
from datetime import datetime, timezone
from typing import Optional

from claimdesk.config import Settings, settings as default_settings
from claimdesk.providers.base import LLMResponse

logger = logging.getLogger(__name__)


class LLMLogger:
    """
    Logger for LLM API interactions.

    Logs requests, responses, token usage, and errors to a separate log file
    when LLM logging is enabled in configuration.
    """

    def __init__(self, config: Optional[Settings] = None):
        """Initialize LLM logger with separate file handler."""
        self.config = config or default_settings
        self.llm_logger = logging.getLogger("claimdesk.llm")
        self.enabled = self.config.llm_logging_enabled

        if self.enabled and self.config.log_file_enabled:
            self._setup_file_handler()

    def _setup_file_handler(self) -> None:
        """Setup dedicated file handler for LLM logs."""
        llm_dir = self.config.log_directory / "llm"
        llm_dir.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            llm_dir / "requests.log",
            maxBytes=self.config.log_max_bytes,
            backupCount=self.config.log_backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="[%(asctime)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        self.llm_logger.addHandler(handler)
        self.llm_logger.setLevel(logging.INFO)
        self.llm_logger.propagate = False

    def log_request(
        self,
        operation: str,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """
        Log LLM API request details.

        Args:
            operation: Name of the insights operation issuing the call
            model: Model identifier
            prompt: Full user prompt sent to the API
            max_tokens: Maximum tokens requested
            temperature: Temperature parameter

        Returns:
            str: Request ID for correlating with response
        """
        request_id = f"{operation}_{int(time.time() * 1000)}"

        if not self.enabled or not self.config.llm_log_requests:
            return request_id

        prompt_preview = prompt[:500] + "..." if len(prompt) > 500 else prompt

        log_entry = {
            "type": "request",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "operation": operation,
            "model": model,
            "parameters": {
                "max_tokens": max_tokens,
                "temperature": temperature,
            },
            "prompt_preview": prompt_preview,
            "prompt_length": len(prompt),
        }

        self.llm_logger.info(f"REQUEST: {json.dumps(log_entry)}")
        return request_id

    def log_response(
        self,
        request_id: str,
        response: LLMResponse,
        cost_usd: Optional[float] = None,
    ) -> None:
        """
        Log LLM API response details.

        Args:
            request_id: Request ID from log_request()
            response: Provider response
            cost_usd: Estimated cost of the call
        """
        if not self.enabled or not self.config.llm_log_responses:
            return

        log_entry = {
            "type": "response",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "model": response.model,
            "finish_reason": response.finish_reason,
            "content_length": len(response.content),
            "duration_ms": round(response.duration_ms, 2),
        }

        if self.config.llm_log_tokens:
            log_entry["tokens"] = {
                "prompt": response.prompt_tokens,
                "completion": response.completion_tokens,
                "total": response.total_tokens,
            }
            if cost_usd is not None:
                log_entry["cost_usd"] = round(cost_usd, 6)

        if response.content:
            log_entry["content_preview"] = (
                response.content[:200] + "..."
                if len(response.content) > 200
                else response.content
            )

        self.llm_logger.info(f"RESPONSE: {json.dumps(log_entry)}")

    def log_error(self, request_id: str, error: BaseException) -> None:
        """
        Log LLM API error.

        Args:
            request_id: Request ID from log_request()
            error: Exception that occurred
        """
        if not self.enabled:
            return

        log_entry = {
            "type": "error",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        self.llm_logger.error(f"ERROR: {json.dumps(log_entry)}")


# Global LLM logger instance
llm_logger = LLMLogger()
