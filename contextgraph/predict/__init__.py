from .heuristics import predict_artist_roster, predict_connectors, predict_team_name
from .roster import label_fragment_strategy

__all__ = [
    "label_fragment_strategy",
    "predict_artist_roster",
    "predict_connectors",
    "predict_team_name",
]
