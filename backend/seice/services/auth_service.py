import secrets

from werkzeug.security import check_password_hash, generate_password_hash

from seice.services.errors import AuthError, ValidationError
from seice.services.kv_store import KVStore
from seice.services.record_service import new_id, now_iso


def _user_key(email):
    return f"users:{email}"


def _session_key(token):
    return f"session:{token}"


def _public(user):
    return {k: v for k, v in user.items() if k != 'passwordHash'}


class AuthService:
    @staticmethod
    def signup(data):
        name = (data.get('name') or '').strip()
        email = (data.get('email') or '').strip().lower()
        password = data.get('password') or ''
        if not name or not email or not password:
            raise ValidationError('Name, email and password are required')

        if KVStore.get(_user_key(email)):
            raise ValidationError('A user with this email is already registered')

        user = {
            "id": new_id(),
            "name": name,
            "email": email,
            "passwordHash": generate_password_hash(password),
            "createdAt": now_iso(),
        }
        KVStore.set(_user_key(email), user)
        return _public(user)

    @staticmethod
    def login(data, ttl):
        """Valida credenciales y abre una sesión session:{token} con TTL."""
        email = (data.get('email') or '').strip().lower()
        password = data.get('password') or ''
        user = KVStore.get(_user_key(email)) if email else None
        if not user or not check_password_hash(user['passwordHash'], password):
            raise AuthError('Invalid email or password')

        token = secrets.token_urlsafe(32)
        session = {
            "userId": user['id'],
            "email": user['email'],
            "name": user['name'],
            "createdAt": now_iso(),
        }
        KVStore.set(_session_key(token), session, ttl=ttl)
        return token, _public(user)

    @staticmethod
    def resolve(token):
        return KVStore.get(_session_key(token))

    @staticmethod
    def logout(token):
        KVStore.delete(_session_key(token))
