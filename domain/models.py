"""
Domain Models for the IL25 player engine

These are pure data models with no Streamlit dependencies.
They define the core domain language and data structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .numeric import clamp, finite_number

MIN_POTENTIAL = 40
MAX_POTENTIAL = 99


class PositionKey(str, Enum):
    """Primary field positions used for rating weights"""
    GK = "GK"
    LB = "LB"
    RB = "RB"
    CB = "CB"
    LWB = "LWB"
    RWB = "RWB"
    CDM = "CDM"
    LM = "LM"
    RM = "RM"
    CM = "CM"
    CAM = "CAM"
    LW = "LW"
    RW = "RW"
    CF = "CF"
    ST = "ST"


class OVRBand(str, Enum):
    """Rating bands used by the youngster upgrade tables"""
    UP_TO_69 = "≤69"
    B70_74 = "70-74"
    B75_79 = "75-79"
    B80_84 = "80-84"
    B85_89 = "85-89"
    B90_PLUS = "90+"


@dataclass(frozen=True)
class WageRow:
    """One row of a wage table (currency units per season)"""
    defensive: int
    attacking: int


@dataclass
class YoungsterAttributesInput:
    """Everything needed to spread an OVR change over individual attributes"""
    base_ovr: int
    new_ovr: int
    positions: str
    current_attributes: Dict[str, Optional[float]] = field(default_factory=dict)
    ind_training_attrs: List[str] = field(default_factory=list)
    non_weighted_attrs: List[str] = field(default_factory=list)
    potential: Optional[int] = None


@dataclass
class PlayerWage:
    """Wage bill line for a single player"""
    player_id: Optional[str]
    player_name: Optional[str]
    rating: Optional[int]
    positions: Optional[str]
    base_wage: int


@dataclass
class WageBill:
    """Team wage commitments against its budget"""
    total_budget: int
    total_wage_bill: int
    available_balance: int
    breakdown: List[PlayerWage] = field(default_factory=list)
    position_wages: Dict[str, int] = field(default_factory=dict)

    @property
    def player_count(self) -> int:
        return len(self.breakdown)


@dataclass
class WageImpact:
    """Result of checking whether a signing fits in the budget"""
    affordable: bool
    wage_impact: int
    current_wage_bill: int
    new_total_wage_bill: int
    total_budget: int


@dataclass
class YoungsterPreview:
    """Season-end upgrade preview for one youngster"""
    league_player_id: Optional[str]
    player_id: Optional[str]
    player_name: Optional[str]
    team_id: Optional[str]
    positions: str
    base_rating: int
    potential: Optional[int]
    total_games: int
    adjusted_average: float
    games_upgrade: int
    avg_upgrade: int
    delta: int
    new_rating: int
    attribute_updates: Dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        name = self.player_name or self.player_id or "?"
        sign = "+" if self.delta >= 0 else ""
        return f"{name} • {self.positions} • {self.base_rating} → {self.new_rating} ({sign}{self.delta})"


class YoungsterPerformance(BaseModel):
    """Per-competition games and average match rating for one season"""
    model_config = ConfigDict(extra="ignore")

    domestic_games: Optional[float] = None
    domestic_avg: Optional[float] = None
    usc_games: Optional[float] = None
    usc_avg: Optional[float] = None
    ucl_gs_games: Optional[float] = None
    ucl_gs_avg: Optional[float] = None
    ucl_ko_games: Optional[float] = None
    ucl_ko_avg: Optional[float] = None
    uel_gs_games: Optional[float] = None
    uel_gs_avg: Optional[float] = None
    uel_ko_games: Optional[float] = None
    uel_ko_avg: Optional[float] = None
    uecl_gs_games: Optional[float] = None
    uecl_gs_avg: Optional[float] = None
    uecl_ko_games: Optional[float] = None
    uecl_ko_avg: Optional[float] = None


class YoungsterRecord(BaseModel):
    """A youngster row as stored for a league, with current attributes"""
    model_config = ConfigDict(extra="ignore")

    league_player_id: Optional[str] = None
    player_id: Optional[str] = None
    player_name: Optional[str] = None
    team_id: Optional[str] = None
    positions: Optional[str] = None
    rating: Optional[int] = None
    base_rating: Optional[int] = None
    potential: Optional[int] = None
    games_played: Optional[int] = None
    adj_avg: Optional[float] = None
    ind_training_attrs: List[str] = Field(default_factory=list)
    non_weighted_attrs: List[str] = Field(default_factory=list)
    attributes: Dict[str, Optional[float]] = Field(default_factory=dict)
    performance: Optional[YoungsterPerformance] = None

    @field_validator("potential", mode="before")
    @classmethod
    def clamp_potential(cls, v):
        """Stored potentials outside 40-99 are clamped; unreadable ones are dropped."""
        if isinstance(v, str):
            try:
                v = float(v)
            except ValueError:
                return None
        value = finite_number(v)
        if value is None:
            return None
        return clamp(int(value), MIN_POTENTIAL, MAX_POTENTIAL)


class RosterPlayer(BaseModel):
    """Squad member used for wage bill calculations"""
    model_config = ConfigDict(extra="ignore")

    player_id: Optional[str] = None
    player_name: Optional[str] = None
    rating: Optional[int] = None
    positions: Optional[str] = None


class RosterData(BaseModel):
    """Complete roster file structure"""
    version: str
    league_id: Optional[str] = None
    season: int = 1
    budget: int = 0
    players: List[RosterPlayer] = Field(default_factory=list)
    youngsters: List[YoungsterRecord] = Field(default_factory=list)
