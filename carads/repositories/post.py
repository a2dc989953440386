import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import contains_eager, joinedload

from ..models import Brand, Car, Post, POST_STATUS_ACTIVE, CAR_REFERENCES
from .crud import CrudRepository

logger = logging.getLogger(__name__)


class PostRepository(CrudRepository):
    model = Post

    def _query_by_id(self):
        # Самый "тяжелый" запрос: машина со всеми справочниками, владелец и фотографии
        return Post.query.options(
            *[joinedload(Post.car).joinedload(getattr(Car, name)) for name in CAR_REFERENCES],
            joinedload(Post.user),
            joinedload(Post.photos),
        )

    def find_active_posts_order_by_created_at_desc(self):
        return (
            Post.query
            .options(
                joinedload(Post.car).joinedload(Car.brand),
                joinedload(Post.car).joinedload(Car.model),
                joinedload(Post.photos),
            )
            .filter(Post.status == POST_STATUS_ACTIVE)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )

    def find_by_user_id(self, user_id):
        return (
            Post.query
            .options(
                joinedload(Post.car).joinedload(Car.brand),
                joinedload(Post.car).joinedload(Car.model),
            )
            .filter(Post.user_id == user_id)
            .order_by(Post.id.asc())
            .all()
        )

    def find_all_with_photos(self):
        posts = (
            Post.query
            .options(joinedload(Post.photos))
            .order_by(Post.id.asc())
            .all()
        )

        logger.info("Найдено %d объявлений с фотографиями", len(posts))
        for post in posts:
            logger.debug("Объявление id=%s, количество фотографий=%d", post.id, len(post.photos))
        return posts

    def find_posts_for_last_day(self):
        since = datetime.now() - timedelta(days=1)
        return (
            Post.query
            .filter(Post.created_at > since)
            .order_by(Post.id.asc())
            .all()
        )

    def find_posts_with_photo(self):
        return (
            Post.query
            .options(joinedload(Post.photos))
            .filter(Post.photos.any())
            .order_by(Post.id.asc())
            .all()
        )

    def find_posts_by_brand(self, key):
        """Подстрока в названии марки, с учетом регистра (LIKE)."""
        return (
            Post.query
            .join(Post.car)
            .join(Car.brand)
            .options(contains_eager(Post.car).contains_eager(Car.brand))
            .filter(Brand.name.contains(key, autoescape=True))
            .order_by(Post.id.asc())
            .all()
        )
