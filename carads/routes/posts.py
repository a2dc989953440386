from flask import Blueprint, render_template, request, redirect, current_app, abort
from datetime import datetime
import os

from carads import services
from carads.dto import PostCreationDto
from carads.extensions import db
from carads.models import Car, Post, PostPhoto, POST_STATUS_ACTIVE, POST_STATUS_SOLD
from carads.utils.file_handling import get_upload_path, generate_unique_filename, is_empty_file
from carads.utils.security import login_required, current_user

posts_bp = Blueprint('posts', __name__)


@posts_bp.route("/post/createPost", methods=["GET"])
def show_create_form():
    return render_template(
        "post/create_post.html",
        brands=services.brand_service.find_all_order_by_id(),
        models=services.car_model_service.find_all_order_by_id(),
        categories=services.category_service.find_all_order_by_id(),
        bodies=services.body_service.find_all_order_by_id(),
        engines=services.engine_service.find_all_order_by_id(),
        transmission_types=services.transmission_type_service.find_all_order_by_id(),
        drive_types=services.drive_type_service.find_all_order_by_id(),
        car_colors=services.car_color_service.find_all_order_by_id(),
        fuel_types=services.fuel_type_service.find_all_order_by_id(),
        wheel_sides=services.wheel_side_service.find_all_order_by_id(),
        error=request.args.get('error'),
    )


@posts_bp.route("/post/createPost", methods=["POST"])
@login_required
def create_post():
    try:
        dto = PostCreationDto.from_request(request.form, request.files)

        car = services.car_service.create(create_car_from_dto(dto))
        post = services.post_service.create(create_post_from_dto(dto, car, current_user()))

        save_photos(dto.photos, post)

        current_app.logger.info("Создано объявление id=%s, фотографий: %d", post.id, len(dto.photos))
        return redirect('/')

    except Exception:
        db.session.rollback()
        current_app.logger.exception("Ошибка при создании объявления")
        return redirect('/post/createPost?error=true')


@posts_bp.route("/post/myPosts", methods=["GET"])
@login_required
def my_posts():
    posts = services.post_service.find_by_user_id(current_user().id)
    return render_template("post/my_posts.html", posts=posts)


@posts_bp.route("/post/<int:post_id>/sold", methods=["POST"])
@login_required
def mark_sold(post_id):
    post = services.post_service.find_by_id(post_id)
    if post is None or post.user_id != current_user().id:
        abort(404, description=f"Пост с id={post_id} не найден")

    post.status = POST_STATUS_SOLD
    services.post_service.update(post)
    return redirect('/post/myPosts')


def _resolve(service, entity_id, name):
    entity = service.find_by_id(entity_id)
    if entity is None:
        raise LookupError(f"{name} с id={entity_id} не найден")
    return entity


def create_car_from_dto(dto):
    """Собирает Car из DTO, каждый справочник берется по id из своего сервиса"""
    return Car(
        vin=dto.vin,
        mileage=dto.mileage,
        year_of_manufacture=dto.year_of_manufacture,
        count_owners=dto.count_owners,
        brand=_resolve(services.brand_service, dto.brand_id, "Марка"),
        model=_resolve(services.car_model_service, dto.model_id, "Модель"),
        category=_resolve(services.category_service, dto.category_id, "Категория"),
        body=_resolve(services.body_service, dto.body_id, "Кузов"),
        engine=_resolve(services.engine_service, dto.engine_id, "Двигатель"),
        transmission_type=_resolve(services.transmission_type_service, dto.transmission_type_id, "Коробка передач"),
        drive_type=_resolve(services.drive_type_service, dto.drive_type_id, "Привод"),
        car_color=_resolve(services.car_color_service, dto.car_color_id, "Цвет"),
        fuel_type=_resolve(services.fuel_type_service, dto.fuel_type_id, "Топливо"),
        wheel_side=_resolve(services.wheel_side_service, dto.wheel_side_id, "Руль"),
    )


def create_post_from_dto(dto, car, user):
    return Post(
        status=POST_STATUS_ACTIVE,
        description=dto.description,
        price=dto.price,
        created_at=datetime.now(),
        car=car,
        user=user,
    )


def save_photos(photos, post):
    """
    Сохраняет загруженные фотографии на диск и создает по записи PostPhoto на файл.

    Уже записанные файлы при ошибке не удаляются.
    """
    if not photos:
        return

    upload_path = get_upload_path()

    for photo in photos:
        if is_empty_file(photo):
            continue

        # Генерируем уникальное имя
        filename = generate_unique_filename(photo.filename)
        photo.save(os.path.join(upload_path, filename))

        services.post_photo_service.create(PostPhoto(photo_path=filename, post=post))
