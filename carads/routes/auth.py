from flask import Blueprint, request, render_template, redirect, session, current_app

from carads import services
from carads.extensions import password_hasher
from carads.models import User

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/auth/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        try:
            login_value = request.form.get("login")
            password = request.form.get("password")

            user = services.user_service.find_by_login_and_password(login_value, password)

            if user:
                session.clear()
                session['user_id'] = user.id
                return redirect('/')

            error = "Неверный логин или пароль"
            return render_template("auth/login.html", error=error), 401

        except Exception as e:
            current_app.logger.exception("Ошибка авторизации")
            return render_template("auth/login.html", error=f"Ошибка авторизации: {e}"), 500

    return render_template("auth/login.html")


@auth_bp.route("/auth/register", methods=["GET", "POST"])
def register():
    if request.method == "POST":
        login_value = request.form.get("login", "").strip()
        password = request.form.get("password", "")

        if not login_value or not password:
            return render_template("auth/register.html", error="Укажите логин и пароль"), 400

        user = services.user_service.create(User(
            login=login_value,
            password=password_hasher.hash_password(password),
            name=request.form.get("name") or login_value,
        ))
        if user is None:
            return render_template("auth/register.html", error="Пользователь с таким логином уже существует"), 409

        session.clear()
        session['user_id'] = user.id
        return redirect('/')

    return render_template("auth/register.html")


@auth_bp.route("/auth/logout", endpoint='logout')
def logout():
    session.clear()
    return redirect('/auth/login')
