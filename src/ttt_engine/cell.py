# Area: Core
"""
ttt_engine.cell — Occupied board position
=========================================

A Cell is an immutable (row, col, symbol) triple. Construction is
validated: coordinates must be 0-2 and the symbol must be X or O.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Symbol


class Cell(BaseModel):
    """
    A filled position on the board.

    Attributes:
        row: Row index (0-2)
        col: Column index (0-2)
        symbol: Symbol.X or Symbol.O
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=2)
    col: int = Field(ge=0, le=2)
    symbol: Symbol

    @field_validator("symbol")
    @classmethod
    def _symbol_not_empty(cls, value: Symbol) -> Symbol:
        if value is Symbol.EMPTY:
            raise ValueError("a cell cannot hold the EMPTY symbol")
        return value

    @property
    def position(self) -> tuple:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"{self.symbol.value}@({self.row}, {self.col})"
