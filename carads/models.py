from datetime import datetime

from .extensions import db


POST_STATUS_ACTIVE = 'active'
POST_STATUS_SOLD = 'sold'


class ReferenceEntity(db.Model):
    """Справочное значение (марка, кузов, двигатель и т.д.)"""
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)

    def __repr__(self):
        return f"<{type(self).__name__} {self.id} {self.name!r}>"


class Brand(ReferenceEntity):
    __tablename__ = "brands"


class CarModel(ReferenceEntity):
    __tablename__ = "car_models"


class Category(ReferenceEntity):
    __tablename__ = "categories"


class Body(ReferenceEntity):
    __tablename__ = "bodies"


class Engine(ReferenceEntity):
    __tablename__ = "engines"


class TransmissionType(ReferenceEntity):
    __tablename__ = "transmission_types"


class DriveType(ReferenceEntity):
    __tablename__ = "drive_types"


class CarColor(ReferenceEntity):
    __tablename__ = "car_colors"


class FuelType(ReferenceEntity):
    __tablename__ = "fuel_types"


class WheelSide(ReferenceEntity):
    __tablename__ = "wheel_sides"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    login = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255))


class Car(db.Model):
    __tablename__ = "cars"
    __table_args__ = (
        db.CheckConstraint("length(vin) <= 17", name="ck_cars_vin_length"),
    )

    id = db.Column(db.Integer, primary_key=True)
    vin = db.Column(db.String(17), unique=True, nullable=False)
    mileage = db.Column(db.Integer, nullable=False)
    year_of_manufacture = db.Column(db.Integer, nullable=False)
    count_owners = db.Column(db.Integer, nullable=False, default=0)

    brand_id = db.Column(db.Integer, db.ForeignKey('brands.id'), nullable=False)
    model_id = db.Column(db.Integer, db.ForeignKey('car_models.id'), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=False)
    body_id = db.Column(db.Integer, db.ForeignKey('bodies.id'), nullable=False)
    engine_id = db.Column(db.Integer, db.ForeignKey('engines.id'), nullable=False)
    transmission_type_id = db.Column(db.Integer, db.ForeignKey('transmission_types.id'), nullable=False)
    drive_type_id = db.Column(db.Integer, db.ForeignKey('drive_types.id'), nullable=False)
    car_color_id = db.Column(db.Integer, db.ForeignKey('car_colors.id'), nullable=False)
    fuel_type_id = db.Column(db.Integer, db.ForeignKey('fuel_types.id'), nullable=False)
    wheel_side_id = db.Column(db.Integer, db.ForeignKey('wheel_sides.id'), nullable=False)

    brand = db.relationship('Brand')
    model = db.relationship('CarModel')
    category = db.relationship('Category')
    body = db.relationship('Body')
    engine = db.relationship('Engine')
    transmission_type = db.relationship('TransmissionType')
    drive_type = db.relationship('DriveType')
    car_color = db.relationship('CarColor')
    fuel_type = db.relationship('FuelType')
    wheel_side = db.relationship('WheelSide')


# Связи Car со справочниками
CAR_REFERENCES = (
    'brand', 'model', 'category', 'body', 'engine',
    'transmission_type', 'drive_type', 'car_color', 'fuel_type', 'wheel_side',
)


class PostPhoto(db.Model):
    __tablename__ = "post_photos"

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False)
    photo_path = db.Column(db.String(255), nullable=False)

    post = db.relationship('Post', back_populates='photos')


class Post(db.Model):
    __tablename__ = "posts"
    __table_args__ = (
        db.CheckConstraint(
            f"status IN ('{POST_STATUS_ACTIVE}', '{POST_STATUS_SOLD}')",
            name="ck_posts_status",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(6), nullable=False, default=POST_STATUS_ACTIVE)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    price = db.Column(db.Numeric(12, 2))

    car_id = db.Column(db.Integer, db.ForeignKey('cars.id'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    car = db.relationship('Car')
    user = db.relationship('User', backref=db.backref('posts', lazy='select'))
    photos = db.relationship(
        'PostPhoto',
        back_populates='post',
        order_by='PostPhoto.id',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )
