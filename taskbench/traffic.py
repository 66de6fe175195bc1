"""Cars crossing at an intersection, giving way to one another."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import IntEnum

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768

_CAR_SIZE = 100
_SPAWN_SPEED = 1
_SPAWN_FUEL = 10000
_DEADLOCK_SIZE = 4


class Direction(IntEnum):
    """Heading of a car."""

    UP = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}

_YIELDS_TO = {
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
    Direction.LEFT: Direction.DOWN,
}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its corner and size."""

    x: int
    y: int
    width: int
    height: int

    def intersects(self, other: Rect) -> bool:
        """True when the rectangles overlap or touch."""
        return not (
            other.x + other.width < self.x
            or other.y + other.height < self.y
            or other.x > self.x + self.width
            or other.y > self.y + self.height
        )


class Car(ABC):
    """A car moving in a fixed direction at a fixed speed."""

    def __init__(self, rect: Rect, direction: Direction, speed: int) -> None:
        self.rect = rect
        self.direction = Direction(direction)
        self.speed = speed

    @property
    @abstractmethod
    def fuel(self) -> int:
        """Energy left for moving."""

    @abstractmethod
    def refill(self, amount: int) -> None:
        """Add energy."""

    def future_rect(self) -> Rect:
        """Where the car would be after its next move."""
        dx, dy = _OFFSETS[self.direction]
        rect = self.rect
        # Heading right, the predicted rectangle is square, sized by the width.
        height = rect.width if self.direction is Direction.RIGHT else rect.height
        return Rect(rect.x + dx * self.speed, rect.y + dy * self.speed, rect.width, height)

    def must_yield_to(self, other: Car) -> bool:
        """True when this car has to give way to ``other``."""
        return _YIELDS_TO[self.direction] is other.direction

    def move(self) -> None:
        """Advance one step in the car's direction."""
        dx, dy = _OFFSETS[self.direction]
        self.rect = replace(
            self.rect,
            x=self.rect.x + dx * self.speed,
            y=self.rect.y + dy * self.speed,
        )


class GasCar(Car):
    """A car that burns one unit of fuel per move."""

    def __init__(self, rect: Rect, direction: Direction, speed: int, fuel: int = 0) -> None:
        super().__init__(rect, direction, speed)
        self._fuel = fuel

    @property
    def fuel(self) -> int:
        return self._fuel

    def refill(self, amount: int) -> None:
        self._fuel += amount

    def move(self) -> None:
        if self._fuel > 0:
            self._fuel -= 1
            super().move()


class ElectroCar(Car):
    """A car that uses one unit of charge per move."""

    def __init__(self, rect: Rect, direction: Direction, speed: int, charge: int = 0) -> None:
        super().__init__(rect, direction, speed)
        self._charge = charge

    @property
    def fuel(self) -> int:
        return self._charge

    def refill(self, amount: int) -> None:
        self._charge += amount

    def move(self) -> None:
        if self._charge > 0:
            self._charge -= 1
            super().move()


def _half(amount: int) -> int:
    return -((-amount) // 2) if amount < 0 else amount // 2


class HybridCar(Car):
    """A car running on both fuel and charge, picking one at random per move."""

    def __init__(
        self,
        rect: Rect,
        direction: Direction,
        speed: int,
        fuel: int = 0,
        charge: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rect, direction, speed)
        self.gas = fuel
        self.charge = charge
        self._rng = rng if rng is not None else random.Random()

    @property
    def fuel(self) -> int:
        return self.gas + self.charge

    def refill(self, amount: int) -> None:
        half = _half(amount)
        self.charge += half
        self.gas += half

    def move(self) -> None:
        if self.charge <= 0 and self.gas <= 0:
            return
        if self.charge > 0 and self.gas > 0:
            if self._rng.randrange(2) == 0:
                self.charge -= 1
            else:
                self.gas -= 1
        elif self.charge > 0:
            self.charge -= 1
        else:
            self.gas -= 1
        super().move()


def spawn_car(
    rect: Rect, direction: Direction, speed: int, fuel: int, rng: random.Random
) -> Car:
    """Create a gas, electric or hybrid car, chosen at random."""
    kind = rng.randrange(3)
    if kind == 0:
        return GasCar(rect, direction, speed, fuel)
    if kind == 1:
        return ElectroCar(rect, direction, speed, fuel)
    return HybridCar(rect, direction, speed, fuel // 2, fuel // 2, rng=rng)


def spawn_car_from_side(rng: random.Random) -> Car:
    """Create a car entering from a random side of the screen."""
    side = rng.randrange(4)
    if side == 0:
        rect = Rect(SCREEN_WIDTH, SCREEN_HEIGHT // 2, _CAR_SIZE, _CAR_SIZE)
        direction = Direction.LEFT
    elif side == 1:
        rect = Rect(SCREEN_WIDTH // 2, SCREEN_HEIGHT, _CAR_SIZE, _CAR_SIZE)
        direction = Direction.DOWN
    elif side == 2:
        rect = Rect(SCREEN_WIDTH // 2, 0, _CAR_SIZE, _CAR_SIZE)
        direction = Direction.UP
    else:
        rect = Rect(0, SCREEN_HEIGHT // 2, _CAR_SIZE, _CAR_SIZE)
        direction = Direction.RIGHT
    return spawn_car(rect, direction, _SPAWN_SPEED, _SPAWN_FUEL, rng)


def safe_spawn(cars: list[Car], rng: random.Random) -> Car | None:
    """Add a new car unless it would overlap one already present; return it if added."""
    new_car = spawn_car_from_side(rng)
    if any(car.rect.intersects(new_car.rect) for car in cars):
        return None
    cars.append(new_car)
    return new_car


def step(cars: list[Car]) -> list[Car]:
    """Run one round of traffic and return the cars told to move, in order.

    A car whose next position meets another car it must give way to waits.
    Once four waits have piled up, the waiting car furthest left is let go.
    """
    told_to_move: list[Car] = []
    waits = 0
    waiting: list[Car] = []
    for car in cars:
        may_go = True
        for other in cars:
            if other is car:
                continue
            if car.future_rect().intersects(other.future_rect()) and car.must_yield_to(other):
                may_go = False
                waits += 1
                waiting.append(car)
        if may_go:
            car.move()
            told_to_move.append(car)
        if waits == _DEADLOCK_SIZE:
            first = min(waiting, key=lambda waiting_car: waiting_car.rect.x)
            first.move()
            told_to_move.append(first)
    return told_to_move


def run(cars: list[Car], steps: int) -> list[list[Car]]:
    """Run ``steps`` rounds and return what each round moved."""
    if steps < 0:
        raise ValueError("number of steps must not be negative")
    return [step(cars) for _ in range(steps)]