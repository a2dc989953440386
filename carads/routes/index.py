from flask import Blueprint, render_template, current_app, abort

from carads import services

index_bp = Blueprint('index', __name__)


@index_bp.route("/", methods=["GET"])
@index_bp.route("/index", methods=["GET"])
def index():
    posts = services.post_service.find_active_posts_order_by_created_at_desc()
    current_app.logger.info("Контроллер отдал в шаблон %d постов", len(posts))
    return render_template("index.html", posts=posts)


@index_bp.route("/post/<int:post_id>", methods=["GET"])
def show_post(post_id):
    post = services.post_service.find_by_id(post_id)
    if post is None:
        abort(404, description=f"Пост с id={post_id} не найден")

    current_app.logger.info("Открыт пост с id=%s", post_id)
    return render_template("post/show_post.html", post=post)
