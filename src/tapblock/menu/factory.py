"""Factory helpers for creating the main menu entities."""
from esper import World

from tapblock.constants import MENU_ROW_SPACING, MENU_STEP_BUTTON_SIZE
from tapblock.menu.components import (
    MenuAction,
    MenuBackground,
    MenuButton,
    MenuStepper,
    MenuTag,
)

STEPPERS = (
    ("Width", "width"),
    ("Height", "height"),
    ("Colors", "colors"),
)
STEPPER_HALF_SPAN = 150.0


def spawn_main_menu(
    world: World,
    width: int,
    height: int,
    *,
    enable_continue: bool = False,
) -> None:
    """Create the menu background, the board setting steppers and the start buttons."""
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(), MenuTag())

    # Steppers stacked above the centre, top row first.
    top = center_y + MENU_ROW_SPACING * (len(STEPPERS) - 0.5)
    for index, (label, setting) in enumerate(STEPPERS):
        row_y = top - index * MENU_ROW_SPACING
        world.create_entity(MenuStepper(label=label, setting=setting, x=center_x, y=row_y), MenuTag())
        for sign, text in ((-1, "-"), (+1, "+")):
            world.create_entity(
                MenuButton(
                    label=text,
                    action=MenuAction.ADJUST,
                    x=center_x + sign * STEPPER_HALF_SPAN,
                    y=row_y,
                    width=MENU_STEP_BUTTON_SIZE,
                    height=MENU_STEP_BUTTON_SIZE,
                    setting=setting,
                    delta=sign,
                ),
                MenuTag(),
            )

    new_game_y = center_y - MENU_ROW_SPACING
    continue_y = new_game_y - MENU_ROW_SPACING
    button_specs = (
        ("New Game", MenuAction.NEW_GAME, new_game_y, True),
        ("Continue", MenuAction.CONTINUE, continue_y, enable_continue),
    )
    for label, action, y_position, enabled in button_specs:
        world.create_entity(
            MenuButton(
                label=label,
                action=action,
                x=center_x,
                y=y_position,
                enabled=bool(enabled),
            ),
            MenuTag(),
        )


def clear_main_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    to_delete = {ent for ent, _ in world.get_component(MenuTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
