"""Interactive onboarding for brewbot."""

from brewbot.cli.onboarding.wizard import OnboardingWizard

__all__ = ["OnboardingWizard"]
