"""UserService: registration, lookup, partial update, favorites.

Registration pipeline: VALIDATE → UNIQUE → HASH → PERSIST → NOTIFY → RESPOND

NOTIFY is best-effort: the local record is authoritative, and any graph
service failure becomes a warning on an otherwise successful result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from eden.domain.constraints import format_violations, get_validator
from eden.domain.entities import Cart, User
from eden.domain.errors import DomainError, ValidationFailedError
from eden.domain.patch import USER_PATCH, apply_patch
from eden.domain.uniqueness import UniqueRule, check_unique
from eden.infrastructure.graph_client import GraphBadRequestError, GraphClientError
from eden.services._helpers import (
    database_guard,
    domain_error_result,
    dump,
    error_result,
    internal_error_result,
    not_found,
    public_user,
)
from eden.services.base import BaseService
from eden.services.result import ServiceResult
from eden.services.telemetry import traced

if TYPE_CHECKING:
    from eden.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def user_unique_rules(repo: UserRepository) -> tuple[UniqueRule, ...]:
    """Uniqueness rules in check order: cpf, email, userName, cellphone."""
    return (
        UniqueRule("cpf", repo.find_by_cpf, "Cpf is already registered"),
        UniqueRule("email", repo.find_by_email, "Email is already registered"),
        UniqueRule("user_name", repo.find_by_user_name, "UserName is already registered"),
        UniqueRule(
            "cellphone",
            repo.find_by_cellphone,
            "Phone is already registered",
            optional=True,
        ),
    )


def _excluding(user_id: int | None, rule: UniqueRule) -> UniqueRule:
    """Wrap *rule* so the record being updated does not conflict with itself."""

    def lookup(value: Any) -> object | None:
        found = rule.lookup(value)
        if found is not None and getattr(found, "id", None) == user_id:
            return None
        return found

    return UniqueRule(rule.field, lookup, rule.message, optional=True)


class UserService(BaseService):
    """Handles user accounts and their favorites."""

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @traced
    def register(
        self,
        *,
        name: str,
        user_name: str,
        cpf: str,
        email: str,
        password: str,
        cellphone: str | None = None,
    ) -> ServiceResult:
        """Create a user and its cart, then mirror the user to the graph service."""
        op = "register_user"
        warnings: list[str] = []
        candidate = User(
            name=name,
            user_name=user_name,
            cpf=cpf,
            email=email,
            password=password,
            cellphone=cellphone,
        )

        # ── VALIDATE ─────────────────────────────────────────
        violations = get_validator().validate(candidate)
        if violations:
            return domain_error_result(
                op, ValidationFailedError(violations, format_violations(violations))
            )

        try:
            with self._store.transaction() as txn:
                # ── UNIQUE ───────────────────────────────────
                logger.info("Checking unique fields")
                check_unique(candidate, user_unique_rules(txn.users))
                logger.info("None unique field repeated")

                # ── HASH ─────────────────────────────────────
                candidate.password = self._store.hasher.hash(password)

                # ── PERSIST ──────────────────────────────────
                user = txn.users.save(candidate)
                cart = txn.carts.save(Cart(user_id=user.id))
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("Persisting user %s failed", email)
            return internal_error_result(op)

        # ── NOTIFY ───────────────────────────────────────────
        self._notify_graph(user, warnings)

        # ── RESPOND ──────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={**public_user(dump(user)), "cart_id": cart.id},
            warnings=warnings,
        )

    def _notify_graph(self, user: User, warnings: list[str]) -> None:
        """Create the user node in the graph service; failures become warnings."""
        client = self._store.graph_client
        if client is None or user.id is None:
            return
        try:
            client.create_user(user.id, user.name)
        except GraphBadRequestError as exc:
            logger.error("[GRAPH CLIENT] Graph service gave a bad request response: %s", exc)
            warnings.append("Graph service rejected the new user; relationship node not created")
        except GraphClientError as exc:
            logger.warning("[GRAPH CLIENT] Graph service call failed: %s", exc)
            warnings.append("Graph service unavailable; relationship node not created")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @traced
    @database_guard("get_user")
    def find_by_parameter(
        self,
        *,
        user_id: int | None = None,
        cpf: str | None = None,
        email: str | None = None,
    ) -> ServiceResult:
        """Fetch one user by the first parameter given: id, then cpf, then email."""
        op = "get_user"
        with self._store.transaction() as txn:
            if user_id is not None:
                logger.info("Fetching user by id: %s", user_id)
                user = txn.users.find_by_id(user_id)
                missing = ("id", "Id not registered")
            elif cpf is not None:
                logger.info("Fetching user by cpf")
                user = txn.users.find_by_cpf(cpf)
                missing = ("cpf", "Cpf not registered")
            elif email is not None:
                logger.info("Fetching user by email: %s", email)
                user = txn.users.find_by_email(email)
                missing = ("email", "Email not registered")
            else:
                logger.warning("No valid parameter was passed, user not found")
                return error_result(op, "NO_PARAMETER", "No valid parameter has been passed.")

            if user is None or user.id is None:
                return not_found(op, *missing)
            cart = txn.carts.find_by_user_id(user.id)

        data = public_user(dump(user))
        data["cart_id"] = cart.id if cart is not None else None
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    @database_guard("list_users")
    def list_users(self) -> ServiceResult:
        with self._store.transaction() as txn:
            items = [public_user(dump(u)) for u in txn.users.find_all()]
        return ServiceResult(
            ok=True, op="list_users", data={"count": len(items), "items": items}
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @traced
    def partial_update(self, user_id: int, patch: Mapping[str, Any]) -> ServiceResult:
        """Apply a merge-patch (name, userName, password, cellphone) to a user."""
        op = "update_user"
        hasher = self._store.hasher
        try:
            with self._store.transaction() as txn:
                user = txn.users.find_by_id(user_id)
                if user is None:
                    return not_found(op, "id", "User not found")

                changed = apply_patch(
                    user,
                    patch,
                    USER_PATCH,
                    transforms={"password": lambda p: hasher.hash(p) if p else p},
                )
                rules = [
                    _excluding(user.id, rule)
                    for rule in user_unique_rules(txn.users)
                    if rule.field in changed
                ]
                check_unique(user, rules)

                logger.info("Saving user %s in database", user_id)
                txn.users.save(user)
        except DomainError as exc:
            return domain_error_result(op, exc)
        except SQLAlchemyError:
            logger.exception("Updating user %s failed", user_id)
            return internal_error_result(op)

        return ServiceResult(ok=True, op=op, data={"id": user_id, "fields_changed": changed})

    @traced
    @database_guard("delete_user")
    def delete(self, user_id: int) -> ServiceResult:
        op = "delete_user"
        with self._store.transaction() as txn:
            if not txn.users.delete_by_id(user_id):
                return not_found(op, "id", "User not found")
        logger.info("User %s deleted", user_id)
        return ServiceResult(ok=True, op=op, data={"id": user_id})

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    @traced
    @database_guard("register_favorite")
    def register_favorite(self, user_id: int, product_id: int) -> ServiceResult:
        op = "register_favorite"
        with self._store.transaction() as txn:
            if txn.users.find_by_id(user_id) is None:
                return not_found(op, "user", "User not found")
            if txn.products.find_by_id(product_id) is None:
                return not_found(op, "product", "Product not found")
            added = txn.users.add_favorite(user_id, product_id)
            favorites = txn.users.find_favorites(user_id)

        warnings = [] if added else [f"Product {product_id} was already a favorite"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"user_id": user_id, "favorites": favorites},
            warnings=warnings,
        )

    @traced
    @database_guard("get_favorites")
    def get_favorites(self, user_id: int) -> ServiceResult:
        op = "get_favorites"
        with self._store.transaction() as txn:
            if txn.users.find_by_id(user_id) is None:
                return not_found(op, "user", "User not found")
            items = []
            for product_id in txn.users.find_favorites(user_id):
                product = txn.products.find_by_id(product_id)
                if product is None:
                    logger.error("Favorite product %s of user %s is missing", product_id, user_id)
                    return internal_error_result(op)
                items.append(dump(product))
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    @traced
    @database_guard("delete_favorite")
    def delete_favorite(self, user_id: int, product_id: int) -> ServiceResult:
        op = "delete_favorite"
        with self._store.transaction() as txn:
            if txn.users.find_by_id(user_id) is None:
                return not_found(op, "user", "User not found")
            removed = txn.users.remove_favorite(user_id, product_id)

        warnings = [] if removed else [f"Product {product_id} was not a favorite"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"user_id": user_id, "product_id": product_id},
            warnings=warnings,
        )
