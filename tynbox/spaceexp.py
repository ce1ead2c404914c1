"""Top-down space shooter: a steered ship, chasing bots and pooled bullets."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field

from tynbox.geometry import Vec2, lerp

BOTS_COUNT = 16
BULLETS_COUNT = 100
BOT_SHIP_KINDS = 4
HITPOINTS_MAX = 2
TILE_SIZE = 1024
FIRE_RANGE = 256.0
HIT_RADIUS = 16.0
AIM_TOLERANCE = 0.1
AIM_SPREAD = 16
RECOIL = 0.1
SPAWN_CHANCE_ROLL = 64
SPAWN_CHANCE_MAX = 2
SPAWN_DISTANCE = (512, 614)
SPAWN_SPREAD = 256
CAMERA_FOLLOW = 0.01
MARK_FOLLOW = 0.2
START = Vec2(256.0, 256.0)
V2UP = Vec2(0.0, 1.0)

FONT_TEXT = (
    "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯабвгдеёжзийклмнопрст"
    "уфхцчшщъыьэюя!\"#$%&'()*+,-./"
    "0123456789:;<=>?@ABCDEFGHI\nJKLMNOPQRSTUVWXYZ[]^_`"
    "abcdefghijklmn\nopqrstuvwxyz{|}~¿"
)


class ControlMode(enum.IntEnum):
    POINTER = 0
    WASD = 1


@dataclass(frozen=True)
class PawnConfig:
    """Movement tuning of a ship."""

    speed: float
    force_acc: float
    force_break: float
    rot_dump: float
    action_threshold: float


@dataclass(frozen=True)
class BulletConfig:
    speed: float
    lifetime: float


@dataclass
class Pawn:
    """A ship: the player or a bot, with its sprite rotation and scale."""

    position: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=Vec2)
    target_position: Vec2 = field(default_factory=Vec2)
    look_at: Vec2 = field(default_factory=Vec2)
    speed: float = 0.0
    look_direction: Vec2 = field(default_factory=Vec2)
    control_mode: ControlMode = ControlMode.POINTER
    alive: bool = False
    action_timestamp: float = 0.0
    hitpoints: int = 0
    rotation: float = 0.0
    scale: float = 1.0
    ship: int = 0


@dataclass
class Bullet:
    timestamp: float = 0.0
    speed: float = 0.0
    position: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=Vec2)
    alive: bool = False
    rotation: float = 0.0


@dataclass(frozen=True)
class FrameInput:
    """Everything the game reads from the outside world for one frame."""

    mouse: Vec2 = field(default_factory=Vec2)
    now: float = 0.0
    key_pressed: bool = False
    left_button_down: bool = False
    direction: Vec2 = field(default_factory=Vec2)
    screen_width: int = 512
    screen_height: int = 512


PLAYER_CONFIG = PawnConfig(7.0, 0.05, 0.3, 0.2, 0.03)
BOT_CONFIG = PawnConfig(3.0, 0.15, 0.2, 0.2, 0.1)
BULLET_CONFIG = BulletConfig(12.0, 1.0)


def _sprite_rotation(direction: Vec2) -> float:
    return math.degrees(V2UP.angle(direction)) - 180.0


def pointer_controls(pawn: Pawn, config: PawnConfig) -> None:
    """Steer ``pawn`` towards its target position with acceleration and braking."""
    target = pawn.target_position - (pawn.position + pawn.direction)
    distance = target.length()
    direction = target.normalize()
    maxspeed = direction * min(distance, config.speed)

    acceleration = maxspeed - pawn.direction
    brake = pawn.direction * min(0.0, pawn.direction.normalize().dot(direction))

    pawn.direction = pawn.direction + acceleration * config.force_acc
    pawn.direction = pawn.direction + brake * config.force_break
    pawn.position = pawn.position + pawn.direction


def wasd_controls(pawn: Pawn, config: PawnConfig, direction: Vec2) -> None:
    """Move ``pawn`` from a keyboard direction whose components are -1, 0 or 1."""
    pressed = bool(direction.x or direction.y)
    pawn.speed = lerp(pawn.speed, config.speed if pressed else 0.0, config.force_acc)
    pawn.direction = Vec2(
        lerp(pawn.direction.x, direction.x, config.rot_dump),
        lerp(pawn.direction.y, direction.y, config.rot_dump),
    )
    pawn.position = pawn.position + pawn.direction * pawn.speed


def step_pawn_look(pawn: Pawn, config: PawnConfig) -> None:
    """Turn the pawn's gaze towards ``look_at`` and update its sprite rotation."""
    wanted = (pawn.look_at - pawn.position).normalize()
    pawn.look_direction = pawn.look_direction.lerp(wanted, config.rot_dump).normalize()
    pawn.rotation = _sprite_rotation(pawn.look_direction)


def remove_duplicate_codepoints(text: str) -> list[int]:
    """Codepoints of ``text`` with repeats dropped, in order of first appearance."""
    return list(dict.fromkeys(ord(ch) for ch in text))


class Game:
    """State and per-frame logic of the space exploration game."""

    def __init__(
        self,
        rng: random.Random | None = None,
        screen_width: int = 512,
        screen_height: int = 512,
        pawn_config: PawnConfig = PLAYER_CONFIG,
        bot_config: PawnConfig = BOT_CONFIG,
        bullet_config: BulletConfig = BULLET_CONFIG,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(2)
        self.pawn = Pawn(
            position=START,
            direction=V2UP,
            target_position=START,
            look_at=V2UP,
            look_direction=V2UP,
            alive=True,
            hitpoints=1,
        )
        self.pawn_config = pawn_config
        self.bot_config = bot_config
        self.bullet_config = bullet_config

        self.camera_offset = Vec2(float(screen_width // 2), float(screen_height // 2))
        self.camera_target = START
        self.camera_zoom = 1.0

        self.bots = [
            Pawn(ship=self.rng.randint(0, BOT_SHIP_KINDS - 1)) for _ in range(BOTS_COUNT)
        ]
        self.bullets = [Bullet() for _ in range(BULLETS_COUNT)]

        self.crosshair = Vec2()
        self.mark_position = Vec2()
        self.mark_rotation = 0.0
        self.mark_scale = 1.0

    def screen_to_world(self, point: Vec2) -> Vec2:
        """World position under a screen point for the current camera."""
        return (point - self.camera_offset) * (1.0 / self.camera_zoom) + self.camera_target

    def alive_bots(self) -> list[Pawn]:
        return [bot for bot in self.bots if bot.alive]

    def alive_bullets(self) -> list[Bullet]:
        return [bullet for bullet in self.bullets if bullet.alive]

    def spawn_bullet(self, position: Vec2, target: Vec2, now: float) -> bool:
        """Fire a free bullet from ``position`` at ``target`` if the ship faces it."""
        for bullet in self.bullets:
            if bullet.alive:
                continue
            offset_x = self.rng.randint(-AIM_SPREAD, AIM_SPREAD)
            offset_y = self.rng.randint(-AIM_SPREAD, AIM_SPREAD)
            shifted = Vec2(float(offset_x), float(offset_y)) + target
            direction = (shifted - position).normalize()
            if direction.distance(self.pawn.look_direction) > AIM_TOLERANCE:
                continue

            bullet.alive = True
            bullet.position = position
            bullet.speed = self.bullet_config.speed
            bullet.timestamp = now
            bullet.direction = direction * bullet.speed
            self.pawn.position = self.pawn.position + (-bullet.direction) * RECOIL
            return True
        return False

    def pawn_action(self, now: float) -> bool:
        """Shoot at the first bot in range once the action cooldown has passed."""
        pawn = self.pawn
        if pawn.action_timestamp + self.pawn_config.action_threshold > now:
            return False
        pawn.action_timestamp = now

        for bot in self.alive_bots():
            in_range = (bot.position - pawn.position).length() < FIRE_RANGE
            if in_range and self.spawn_bullet(pawn.position, bot.position, now):
                return True
        return False

    def spawn_bots(self) -> Pawn | None:
        """Occasionally bring one dead bot back around the player; return it."""
        if self.rng.randint(0, SPAWN_CHANCE_ROLL) > SPAWN_CHANCE_MAX:
            return None

        for bot in self.bots:
            if bot.alive:
                continue
            spread = Vec2(
                float(self.rng.randint(-SPAWN_SPREAD, SPAWN_SPREAD)),
                float(self.rng.randint(-SPAWN_SPREAD, SPAWN_SPREAD)),
            )
            distance = self.rng.randint(*SPAWN_DISTANCE)
            bot.position = self.pawn.position + spread.normalize() * distance
            bot.direction = V2UP
            bot.target_position = START
            bot.speed = 0.0
            bot.look_direction = Vec2()
            bot.alive = True
            bot.hitpoints = self.rng.randint(1, HITPOINTS_MAX)
            bot.scale = bot.hitpoints / HITPOINTS_MAX
            return bot
        return None

    def step_bots(self) -> None:
        """Spawn, chase the player, and take bullet hits."""
        self.spawn_bots()

        for bot in self.alive_bots():
            bot.target_position = self.pawn.position
            bot.look_at = self.pawn.position
            pointer_controls(bot, self.bot_config)
            step_pawn_look(bot, self.pawn_config)

            for bullet in self.alive_bullets():
                if (bullet.position - bot.position).length() < HIT_RADIUS:
                    bullet.alive = False
                    bot.hitpoints -= 1
                    if bot.hitpoints <= 0:
                        bot.alive = False
                    break

    def step_bullets(self, now: float) -> None:
        """Move live bullets and expire those older than their lifetime."""
        for bullet in self.alive_bullets():
            if bullet.timestamp + self.bullet_config.lifetime < now:
                bullet.alive = False
                continue
            bullet.position = bullet.position + bullet.direction
            bullet.rotation = _sprite_rotation(bullet.direction)

    def _step_camera(self, screen_width: int, screen_height: int) -> None:
        self.camera_target = self.camera_target.lerp(self.pawn.target_position, CAMERA_FOLLOW)
        self.camera_offset = Vec2(float(screen_width // 2), float(screen_height // 2))

    def step(self, frame: FrameInput) -> None:
        """Advance the game by one frame of input."""
        pawn = self.pawn
        mouse = frame.mouse

        if pawn.control_mode == ControlMode.POINTER and frame.key_pressed:
            pawn.control_mode = ControlMode.WASD
        elif pawn.control_mode == ControlMode.WASD and frame.left_button_down:
            pawn.control_mode = ControlMode.POINTER

        if frame.left_button_down:
            pawn.target_position = self.screen_to_world(mouse)

        closest_dist = mouse.distance(pawn.position)
        closest_target = mouse
        for bot in self.alive_bots():
            dist = pawn.position.distance(bot.position)
            if dist < closest_dist:
                closest_dist = dist
                closest_target = bot.position
        pawn.look_at = closest_target

        mark_visibility = 1.0
        if pawn.control_mode == ControlMode.WASD:
            mark_visibility = 0.0
            wasd_controls(pawn, self.pawn_config, frame.direction)
        else:
            pointer_controls(pawn, self.pawn_config)

        step_pawn_look(pawn, self.pawn_config)
        self.pawn_action(frame.now)
        self.step_bots()
        self.step_bullets(frame.now)
        self._step_camera(frame.screen_width, frame.screen_height)

        self.crosshair = mouse
        self.mark_position = pawn.target_position
        self.mark_rotation += 1.0
        pulse = (1.1 + math.sin(frame.now) * 0.1) * mark_visibility
        self.mark_scale = lerp(self.mark_scale, pulse, MARK_FOLLOW)

    def world_tiles(self) -> list[tuple[int, int]]:
        """Top-left corners of the 4x4 floor tiles around the camera."""
        tile_x = int(self.camera_target.x / TILE_SIZE)
        tile_y = int(self.camera_target.y / TILE_SIZE)
        return [
            ((tile_x + i % 4 - 2) * TILE_SIZE, (tile_y + i // 4 - 2) * TILE_SIZE)
            for i in range(16)
        ]