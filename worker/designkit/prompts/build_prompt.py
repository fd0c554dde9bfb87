"""Compile a submission into the build-instructions document.

Every branch ends in defined text: unknown palette or inspiration keys
produce empty values, never an exception.
"""
from __future__ import annotations

from designkit.models import Submission
from designkit.prompts.vocabulary import (
    COLOR_PALETTES,
    DESIGN_STYLES,
    FEATURE_PHRASES,
    Palette,
    lookup,
)

APP_NAME_FALLBACK = "your app"
NO_FEATURES_LINE = "Standard iOS patterns and interactions"

_EMPTY_PALETTE = Palette(colors=(), description="")


def resolve_app_name(submission: Submission) -> str:
    return submission.app_name or APP_NAME_FALLBACK


def resolve_palette(key: str | None) -> Palette:
    return lookup(COLOR_PALETTES, key) or _EMPTY_PALETTE


def resolve_style(key: str | None) -> str:
    return lookup(DESIGN_STYLES, key) or ""


def _serious_fun(score: int) -> str | None:
    if score >= 4:
        return "Keep the tone fun, casual, and approachable. "
    if score <= 2:
        return "Maintain a professional, serious tone throughout. "
    return None


def _minimal_rich(score: int) -> str | None:
    if score <= 2:
        return "Focus on minimalism—only include essential features with lots of white space. "
    if score >= 4:
        return "Make it feature-rich with plenty of options, details, and functionality. "
    return None


def _gentle_motivating(score: int) -> str | None:
    if score >= 4:
        return "Use motivating language and challenging prompts to push users forward. "
    if score <= 2:
        return "Be gentle and supportive in the language and interactions. "
    return None


def personality_sentences(submission: Submission) -> list[str]:
    """Tone sentences in fixed axis order; a neutral score (3) adds nothing."""
    sentences = [
        _serious_fun(submission.personality_serious_fun),
        _minimal_rich(submission.personality_minimal_rich),
        _gentle_motivating(submission.personality_gentle_motivating),
    ]
    return [s for s in sentences if s]


def feature_list(submission: Submission) -> list[str]:
    return [phrase for flag, phrase in FEATURE_PHRASES if getattr(submission, flag)]


def _color_lines(palette: Palette) -> str:
    lines = []
    for i, color in enumerate(palette.colors):
        if i == 0:
            label = "Primary"
        elif i == 1:
            label = "Secondary"
        else:
            label = f"Accent {i - 1}"
        lines.append(f"- {label}: {color}")
    return "\n".join(lines)


def _optional(enabled: bool, line: str) -> str:
    return line if enabled else ""


def compile_prompt(submission: Submission) -> str:
    """Render the full markdown build prompt for *submission*."""
    app_name = resolve_app_name(submission)
    palette = resolve_palette(submission.color_palette)
    style = resolve_style(submission.design_inspiration)
    personality = "".join(personality_sentences(submission))

    features = feature_list(submission) or [NO_FEATURES_LINE]
    features_str = "\n".join(f"- {f}" for f in features)

    feelings = ", ".join(submission.feelings)
    inspiration = submission.design_inspiration or ""
    action = submission.main_action.lower()
    audience = submission.target_audience.lower()

    dark_mode_line = _optional(
        submission.dark_mode,
        "- Add dark mode support using @Environment(\\.colorScheme)",
    )
    animations_line = _optional(
        submission.animations,
        "- Add smooth animations using SwiftUI transitions",
    )
    rounded_line = _optional(
        submission.rounded_corners,
        "- Use rounded corners (cornerRadius: 12-20) throughout",
    )
    gradients_line = _optional(
        submission.gradients,
        "- Incorporate gradient backgrounds where appropriate",
    )

    return f"""\
# Build {app_name} - iOS App

## App Concept
{submission.app_idea}

**Target Users:** {submission.target_audience}
**Primary Action:** {submission.main_action}

## Design Direction

**Emotional Tone:**
This app should feel {feelings}.

**Visual Style:**
{style}

**Color Palette:**
Use {palette.description}. Primary colors:
{_color_lines(palette)}

**Personality:**
{personality}

## Technical Requirements

**Platform:** iOS (SwiftUI)

**Special Features:**
{features_str}

## Implementation Plan

1. **Project Setup:**
   - Create a new iOS project using Xcode
   - Set up SwiftUI with the color scheme defined above
   - Configure basic navigation structure

2. **Core Features:**
   - Build the main {action} functionality
   - Implement user onboarding flow
   {dark_mode_line}
   {animations_line}

3. **UI Components:**
   - Design reusable components matching the {inspiration} aesthetic
   - Implement the color palette consistently across all screens
   {rounded_line}
   {gradients_line}

4. **Polish:**
   - Add micro-interactions and feedback
   - Ensure accessibility (VoiceOver, Dynamic Type)
   - Test on different iOS devices and screen sizes

## Getting Started

Create a new iOS project in Xcode:
1. Open Xcode
2. Create New Project → iOS → App
3. Use SwiftUI for the interface
4. Name it "{app_name}"

Then start building! Focus on the core {action} functionality first, then layer in the design aesthetics.

---

**Design Keywords:** {feelings}, {inspiration}-inspired, {palette.description}
**User Experience Goal:** Make it effortless for {audience} to {action}
"""
