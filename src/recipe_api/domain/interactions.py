"""Results of rating and like writes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RatingSummary:
    """Denormalized rating counters for a recipe."""

    rating_count: int
    average_rating: float

    def as_dict(self) -> dict[str, object]:
        return {"ratingCount": self.rating_count, "averageRating": self.average_rating}


@dataclass(frozen=True)
class LikeState:
    """Like state for a user and the recipe's like total."""

    liked: bool
    like_count: int

    def as_dict(self) -> dict[str, object]:
        return {"liked": self.liked, "likeCount": self.like_count}
