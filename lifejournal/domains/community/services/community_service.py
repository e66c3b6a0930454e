"""Community feed: one global, size-capped list of posts."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from flask import current_app

from lifejournal.core.store import ListResource
from lifejournal.core.store.keys import COMMUNITY_POSTS_KEY
from lifejournal.core.utils.ids import utc_now_iso
from lifejournal.domains.community.schemas.community_schemas import CommunityPostCreate
from lifejournal.extensions import kv_store

logger = logging.getLogger(__name__)

DEFAULT_MAX_POSTS = 100
DEFAULT_FEED_SIZE = 20
PLACEHOLDER_AVATAR = "/placeholder.svg?height=40&width=40"


def _posts() -> ListResource:
    max_posts = current_app.config.get("COMMUNITY_MAX_POSTS", DEFAULT_MAX_POSTS)
    return ListResource(kv_store.backend, COMMUNITY_POSTS_KEY, max_length=max_posts)


def list_posts(limit: Optional[int] = None) -> List[dict]:
    size = limit if limit is not None else current_app.config.get("COMMUNITY_FEED_SIZE", DEFAULT_FEED_SIZE)
    return _posts().fetch()[:size]


def create_post(user_id: str, author: str, data: CommunityPostCreate) -> dict:
    record = {
        "userId": user_id,
        "author": data.user_name or author,
        "avatar": PLACEHOLDER_AVATAR,
        "title": data.title,
        "content": data.content,
        "date": utc_now_iso(),
        "likes": 0,
        "comments": 0,
        "lifeAreas": data.life_areas,
        "goalAchieved": data.goal_achieved,
        "mood": data.mood,
        "likedBy": [],
    }
    post = _posts().append(record)
    logger.info("Community post %s created by user %s", post["id"], user_id)
    return post


def toggle_like(post_id: str, user_id: str) -> Tuple[bool, int]:
    """Flip ``user_id``'s like on a post; returns (liked, likes).

    Raises ValueError("not_found") for an unknown post.
    """

    def flip(post: dict) -> dict:
        liked_by = list(post.get("likedBy") or [])
        likes = int(post.get("likes") or 0)
        if user_id in liked_by:
            liked_by = [uid for uid in liked_by if uid != user_id]
            likes = max(0, likes - 1)
        else:
            liked_by.append(user_id)
            likes += 1
        return {**post, "likedBy": liked_by, "likes": likes}

    post = _posts().apply_by_id(post_id, flip)
    return user_id in post["likedBy"], post["likes"]
