"""
Pydantic schemas for API request/response validation.

Table events arrive as JSON objects tagged by "type" and are converted into
the immutable core events before they reach an agent.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import AfterValidator, BaseModel, Field, field_validator

from deepthought.core.actions import Action
from deepthought.core.card import Card
from deepthought.core.rules import ActionType, Phase
from deepthought.core import events


def _card(value: str) -> Card:
    return Card.from_string(value)


def _check_card(value: str) -> str:
    Card.from_string(value)
    return value


CardString = Annotated[str, AfterValidator(_check_card)]


# ============= Action Schemas =============

class ActionSchema(BaseModel):
    """An action with its server-fixed amount."""
    type: ActionType = Field(..., description="Action type: FOLD, CHECK, CALL, RAISE, ALL_IN")
    amount: int = Field(default=0, ge=0, description="Amount for CALL/RAISE/ALL_IN")

    @field_validator("type", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def to_action(self) -> Action:
        return Action(self.type, self.amount)

    @classmethod
    def from_action(cls, action: Action) -> "ActionSchema":
        return cls(**action.to_dict())


class ActionRequest(BaseModel):
    """The server asks for a decision and lists what is allowed."""
    possible_actions: List[ActionSchema] = Field(default_factory=list)

    def to_actions(self) -> List[Action]:
        return [a.to_action() for a in self.possible_actions]


# ============= Event Schemas =============

class PlayIsStartedMessage(BaseModel):
    type: Literal["PlayIsStarted"]
    players: List[str] = Field(..., min_length=1)
    dealer: str
    small_blind_player: str
    big_blind_player: str
    small_blind: int = Field(ge=0)
    big_blind: int = Field(ge=0)
    table_id: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayIsStarted(
            players=tuple(self.players),
            dealer=self.dealer,
            small_blind_player=self.small_blind_player,
            big_blind_player=self.big_blind_player,
            small_blind=self.small_blind,
            big_blind=self.big_blind,
            table_id=self.table_id,
        )


class TableChangedStateMessage(BaseModel):
    type: Literal["TableChangedState"]
    state: Phase

    def to_event(self) -> events.TableEvent:
        return events.TableChangedState(phase=self.state)


class YouHaveBeenDealtACardMessage(BaseModel):
    type: Literal["YouHaveBeenDealtACard"]
    card: CardString

    def to_event(self) -> events.TableEvent:
        return events.YouHaveBeenDealtACard(card=_card(self.card))


class CommunityHasBeenDealtACardMessage(BaseModel):
    type: Literal["CommunityHasBeenDealtACard"]
    card: CardString

    def to_event(self) -> events.TableEvent:
        return events.CommunityHasBeenDealtACard(card=_card(self.card))


class PlayerBetSmallBlindMessage(BaseModel):
    type: Literal["PlayerBetSmallBlind"]
    player: str
    small_blind: int = Field(ge=0)

    def to_event(self) -> events.TableEvent:
        return events.PlayerBetSmallBlind(player=self.player, small_blind=self.small_blind)


class PlayerBetBigBlindMessage(BaseModel):
    type: Literal["PlayerBetBigBlind"]
    player: str
    big_blind: int = Field(ge=0)

    def to_event(self) -> events.TableEvent:
        return events.PlayerBetBigBlind(player=self.player, big_blind=self.big_blind)


class PlayerFoldedMessage(BaseModel):
    type: Literal["PlayerFolded"]
    player: str
    investment_in_pot: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayerFolded(player=self.player, investment_in_pot=self.investment_in_pot)


class PlayerForcedFoldedMessage(BaseModel):
    type: Literal["PlayerForcedFolded"]
    player: str
    investment_in_pot: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayerForcedFolded(player=self.player, investment_in_pot=self.investment_in_pot)


class PlayerCalledMessage(BaseModel):
    type: Literal["PlayerCalled"]
    player: str
    call_bet: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayerCalled(player=self.player, call_bet=self.call_bet)


class PlayerRaisedMessage(BaseModel):
    type: Literal["PlayerRaised"]
    player: str
    raise_bet: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayerRaised(player=self.player, raise_bet=self.raise_bet)


class PlayerWentAllInMessage(BaseModel):
    type: Literal["PlayerWentAllIn"]
    player: str
    all_in_amount: int = 0

    def to_event(self) -> events.TableEvent:
        return events.PlayerWentAllIn(player=self.player, all_in_amount=self.all_in_amount)


class PlayerCheckedMessage(BaseModel):
    type: Literal["PlayerChecked"]
    player: str

    def to_event(self) -> events.TableEvent:
        return events.PlayerChecked(player=self.player)


class YouWonAmountMessage(BaseModel):
    type: Literal["YouWonAmount"]
    won_amount: int = 0
    chips_after: int = 0

    def to_event(self) -> events.TableEvent:
        return events.YouWonAmount(won_amount=self.won_amount, chips_after=self.chips_after)


class PlayerShowDownSchema(BaseModel):
    player: str
    cards: List[CardString] = []
    won_amount: int = 0
    folded: bool = False


class ShowDownMessage(BaseModel):
    type: Literal["ShowDown"]
    players_show_down: List[PlayerShowDownSchema] = []

    def to_event(self) -> events.TableEvent:
        return events.ShowDown(players_show_down=tuple(
            events.PlayerShowDown(
                player=psd.player,
                cards=tuple(_card(c) for c in psd.cards),
                won_amount=psd.won_amount,
                folded=psd.folded,
            )
            for psd in self.players_show_down
        ))


class PlayerQuitMessage(BaseModel):
    type: Literal["PlayerQuit"]
    player: str

    def to_event(self) -> events.TableEvent:
        return events.PlayerQuit(player=self.player)


class TableIsDoneMessage(BaseModel):
    type: Literal["TableIsDone"]
    chips: int = 0

    def to_event(self) -> events.TableEvent:
        return events.TableIsDone(chips=self.chips)


class ServerIsShuttingDownMessage(BaseModel):
    type: Literal["ServerIsShuttingDown"]

    def to_event(self) -> events.TableEvent:
        return events.ServerIsShuttingDown()


EventMessage = Annotated[
    Union[
        PlayIsStartedMessage,
        TableChangedStateMessage,
        YouHaveBeenDealtACardMessage,
        CommunityHasBeenDealtACardMessage,
        PlayerBetSmallBlindMessage,
        PlayerBetBigBlindMessage,
        PlayerFoldedMessage,
        PlayerForcedFoldedMessage,
        PlayerCalledMessage,
        PlayerRaisedMessage,
        PlayerWentAllInMessage,
        PlayerCheckedMessage,
        YouWonAmountMessage,
        ShowDownMessage,
        PlayerQuitMessage,
        TableIsDoneMessage,
        ServerIsShuttingDownMessage,
    ],
    Field(discriminator="type"),
]


class EventRequest(BaseModel):
    """A single table event for one table."""
    event: EventMessage


# ============= Response Schemas =============

class EventResultSchema(BaseModel):
    table_id: str
    event: str
    raise_counter: int


class TableStateSchema(BaseModel):
    table_id: str
    hand_number: int
    phase: str
    raise_counter: int
    done: bool
    snapshot: Optional[Dict[str, Any]] = None


class HealthSchema(BaseModel):
    status: str
    name: str
    tables: int
    table_sizes: List[int]
