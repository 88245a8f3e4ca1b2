"""Draws the menu screen: title, board-setting steppers and start buttons."""
from esper import World

from tapblock.components.game_state import GameMode
from tapblock.components.settings import SETTING_RANGES
from tapblock.constants import OVERLAY_TEXT_COLOR, WINDOW_TITLE
from tapblock.menu.components import MenuBackground, MenuButton, MenuStepper
from tapblock.utils.game_state import current_mode, get_settings

# (fill, outline/text) per enabled state.
BUTTON_STYLES = {
    True: ((72, 61, 139), (255, 255, 255)),
    False: ((96, 110, 130), (192, 192, 192)),
}
HINT_COLOR = (150, 160, 180)


class MenuRenderSystem:
    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        if current_mode(self.world) != GameMode.MENU:
            return
        import arcade

        width = self.window.width
        height = self.window.height
        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(0, width, 0, height, background.color)

        arcade.draw_text(
            WINDOW_TITLE,
            width / 2,
            height - 48,
            OVERLAY_TEXT_COLOR,
            36,
            anchor_x="center",
            anchor_y="top",
            bold=True,
        )
        self._draw_steppers(arcade)
        for _, button in self.world.get_component(MenuButton):
            self._draw_button(arcade, button)

    def _draw_steppers(self, arcade) -> None:
        settings = get_settings(self.world)
        for _, stepper in self.world.get_component(MenuStepper):
            low, high = SETTING_RANGES[stepper.setting]
            arcade.draw_text(
                f"{stepper.label}: {getattr(settings, stepper.setting)}",
                stepper.x,
                stepper.y + 4,
                OVERLAY_TEXT_COLOR,
                22,
                anchor_x="center",
                anchor_y="baseline",
            )
            arcade.draw_text(
                f"{low} - {high}",
                stepper.x,
                stepper.y,
                HINT_COLOR,
                12,
                anchor_x="center",
                anchor_y="top",
            )

    @staticmethod
    def _draw_button(arcade, button: MenuButton) -> None:
        fill, ink = BUTTON_STYLES[bool(button.enabled)]
        left = button.x - button.width / 2
        bottom = button.y - button.height / 2
        arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill)
        arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, ink, border_width=2)
        # Step buttons carry a single glyph and get a larger face.
        font_size = 28 if button.setting else 24
        arcade.draw_text(
            button.label,
            button.x,
            button.y,
            ink,
            font_size,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
