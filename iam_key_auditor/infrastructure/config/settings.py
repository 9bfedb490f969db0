"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.value_objects import EnrichmentFailurePolicy
from ..adapters.aws_iam.iam_client import IamClientConfig
from ..adapters.notifications.slack import SlackConfig
from ..adapters.notifications.webhook import WebhookConfig


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # AWS (credential resolution itself stays with boto3)
    aws_profile: str = field(default_factory=lambda: _env_str("AWS_PROFILE"))
    aws_region: str = field(default_factory=lambda: _env_str("AWS_REGION"))
    iam_max_attempts: int = field(default_factory=lambda: _env_int("IAM_MAX_ATTEMPTS", 5))
    iam_timeout_seconds: int = field(default_factory=lambda: _env_int("IAM_TIMEOUT_SECONDS", 30))

    # Audit behaviour
    enrichment_failure_policy: str = field(
        default_factory=lambda: _env_str("ENRICHMENT_FAILURE_POLICY", str(EnrichmentFailurePolicy.NEVER_USED))
    )
    abort_on_mutation_error: bool = field(default_factory=lambda: _env_bool("ABORT_ON_MUTATION_ERROR"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # Slack settings
    slack_enabled: bool = field(default_factory=lambda: _env_bool("SLACK_ENABLED"))
    slack_webhook_url: str = field(default_factory=lambda: _env_str("SLACK_WEBHOOK_URL"))

    # Webhook settings
    webhook_enabled: bool = field(default_factory=lambda: _env_bool("WEBHOOK_ENABLED"))
    webhook_url: str = field(default_factory=lambda: _env_str("WEBHOOK_URL"))

    def validate(self) -> None:
        """Validate settings."""
        problems: list[str] = []

        allowed = {str(policy) for policy in EnrichmentFailurePolicy}
        if self.enrichment_failure_policy.lower() not in allowed:
            problems.append(
                f"ENRICHMENT_FAILURE_POLICY must be one of {', '.join(sorted(allowed))}"
            )
        if self.iam_max_attempts < 1:
            problems.append("IAM_MAX_ATTEMPTS must be at least 1")
        if self.iam_timeout_seconds <= 0:
            problems.append("IAM_TIMEOUT_SECONDS must be positive")
        if self.slack_enabled and not self.slack_webhook_url:
            problems.append("SLACK_WEBHOOK_URL is required when SLACK_ENABLED is set")
        if self.webhook_enabled and not self.webhook_url:
            problems.append("WEBHOOK_URL is required when WEBHOOK_ENABLED is set")

        if problems:
            msg = f"Invalid configuration: {'; '.join(problems)}"
            raise ValueError(msg)

    @cached_property
    def iam_config(self) -> IamClientConfig:
        """Get IAM client configuration."""
        return IamClientConfig(
            profile_name=self.aws_profile or None,
            region_name=self.aws_region or None,
            max_attempts=self.iam_max_attempts,
            timeout=float(self.iam_timeout_seconds),
        )

    @cached_property
    def failure_policy(self) -> EnrichmentFailurePolicy:
        """Get the enrichment failure policy."""
        return EnrichmentFailurePolicy(self.enrichment_failure_policy.lower())

    @cached_property
    def slack_config(self) -> SlackConfig:
        """Get Slack configuration."""
        return SlackConfig(
            enabled=self.slack_enabled,
            webhook_url=self.slack_webhook_url,
        )

    @cached_property
    def webhook_config(self) -> WebhookConfig:
        """Get webhook configuration."""
        return WebhookConfig(
            enabled=self.webhook_enabled,
            url=self.webhook_url,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
