"""
Demo mods registered by ``python -m mod_config``.
"""

from .options import SettingsService


def register_demo_options(service: SettingsService) -> None:
    """Register a few mods covering every option type."""
    service.register_mod(
        "auto_save",
        "Auto Save",
        "Saves the game periodically in the background.",
    )
    service.register_option(
        "auto_save",
        "enabled",
        name="Enabled",
        description="Save automatically.",
        type="boolean",
        default=True,
    )
    service.register_option(
        "auto_save",
        "interval",
        name="Interval (minutes)",
        description="Minutes between two saves.",
        type="number",
        default=10,
        min=1,
        max=120,
        order=2,
    )
    service.register_option(
        "auto_save",
        "slots",
        name="Rotating Slots",
        description="How many save files to rotate through.",
        type="number",
        default=3,
        min=1,
        max=9,
        order=3,
    )

    service.register_mod(
        "hud_tweaks",
        "HUD Tweaks",
        "Small changes to the heads-up display.",
    )
    service.register_option(
        "hud_tweaks",
        "clock",
        name="Clock Format",
        description="How the in-game clock is shown.",
        type="enum",
        default="24h",
        values=[
            {"value": "24h", "label": "24 hours"},
            {"value": "12h", "label": "12 hours"},
            {"value": "hidden", "label": "Hidden"},
        ],
    )
    service.register_option(
        "hud_tweaks",
        "opacity",
        name="Opacity",
        description="Opacity of the HUD panels.",
        type="number",
        default=0.8,
        min=0.1,
        max=1.0,
        step=0.05,
        order=2,
    )
    service.register_option(
        "hud_tweaks",
        "compact",
        name="Compact Mode",
        description="Use smaller panels.",
        order=3,
    )
