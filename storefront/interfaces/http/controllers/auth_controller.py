# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, render_template, url_for
from pydantic import ValidationError

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import IssuedToken
from storefront.domain.users.exceptions import InvalidCredentialsError, RegistrationRejectedError
from storefront.interfaces.http.dto.auth import CredentialsFormDTO
from storefront.interfaces.http.forms import form_payload
from storefront.shared.config import load_config
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.logging import logger
from storefront.shared.middleware.rate_limit import rate_limit


def _credentials() -> CredentialsFormDTO:
    try:
        return CredentialsFormDTO.model_validate(form_payload())
    except ValidationError as exc:
        raise_validation_error(exc)


def _set_auth_cookie(response: Response, token: IssuedToken) -> None:
    security = load_config().security
    response.set_cookie(
        security.auth_cookie_name,
        token.value,
        httponly=True,
        samesite=security.cookie_samesite,
        secure=security.cookie_secure,
        max_age=token.max_age,
    )


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def login_form(self):
        return render_template("login.html", errors=[])

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self):
        dto = _credentials()
        try:
            _, token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError as exc:
            return render_template("login.html", errors=exc.messages, username=dto.username), exc.status

        response = redirect(url_for("misc.index"))
        _set_auth_cookie(response, token)
        return response

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self):
        dto = _credentials()
        try:
            _, token = self._register_use_case.execute(dto.username, dto.password)
        except RegistrationRejectedError as exc:
            return (
                render_template("homepage.html", errors=exc.messages, username=dto.username),
                exc.status,
            )

        response = redirect(url_for("misc.index"))
        _set_auth_cookie(response, token)
        return response

    def logout(self):
        security = load_config().security
        response = redirect(url_for("misc.index"))
        response.delete_cookie(
            security.auth_cookie_name,
            httponly=True,
            samesite=security.cookie_samesite,
            secure=security.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login_form, methods=["GET"])
        bp.add_url_rule("/login", endpoint="login_submit", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return bp
