from ..models import PostPhoto
from .crud import CrudRepository


class PostPhotoRepository(CrudRepository):
    model = PostPhoto

    def find_by_post_id(self, post_id):
        return (
            PostPhoto.query
            .filter(PostPhoto.post_id == post_id)
            .order_by(PostPhoto.id.asc())
            .all()
        )
