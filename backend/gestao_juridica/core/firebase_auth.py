"""
Integração com Firebase Authentication.

Operações privilegiadas (criar usuário, verificar token, trocar senha) usam o
Firebase Admin SDK. Operações que dependem da senha do próprio usuário
(login, reautenticação, e-mail de redefinição de senha) usam a API REST do
Identity Toolkit.
"""

from typing import Any

import firebase_admin
import httpx
import structlog
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from gestao_juridica.core.config import Settings
from gestao_juridica.core.exceptions import (
    AuthenticationError,
    EmailAlreadyInUseError,
    IdentityProviderError,
    InvalidTokenError,
    ResourceNotFoundError,
    TooManyAttemptsError,
)

logger = structlog.get_logger()

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"

_INVALID_CREDENTIALS = {"EMAIL_NOT_FOUND", "INVALID_PASSWORD", "INVALID_LOGIN_CREDENTIALS", "USER_DISABLED"}


def get_firebase_app(settings: Settings) -> firebase_admin.App:
    """Retorna o app padrão do Firebase Admin SDK, inicializando se preciso."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options: dict[str, Any] = {}
    if settings.FIREBASE_PROJECT_ID:
        options["projectId"] = settings.FIREBASE_PROJECT_ID
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET

    try:
        # Em produção, usa ADC (Application Default Credentials)
        if settings.FIREBASE_CREDENTIALS_PATH:
            cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
            app = firebase_admin.initialize_app(cred, options or None)
        else:
            app = firebase_admin.initialize_app(options=options or None)
    except (ValueError, OSError) as e:
        logger.error("Erro ao inicializar Firebase Admin", error=str(e))
        raise IdentityProviderError("Erro ao inicializar o provedor de identidade")

    logger.info("Firebase Admin SDK inicializado")
    return app


class FirebaseAuthService:
    """
    Serviço de autenticação com Firebase.

    O app do Admin SDK é inicializado sob demanda na primeira chamada.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        self._settings = settings
        self._app: firebase_admin.App | None = None
        self._http = http_client

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            self._app = get_firebase_app(self._settings)
        return self._app

    async def verify_token(self, id_token: str) -> dict[str, Any]:
        """
        Verifica token ID do Firebase.

        Raises:
            InvalidTokenError: Token inválido ou expirado
        """
        try:
            decoded_token = auth.verify_id_token(id_token, app=self.app)
        except (auth.ExpiredIdTokenError, auth.RevokedIdTokenError):
            logger.warning("Token Firebase expirado ou revogado")
            raise InvalidTokenError()
        except (auth.InvalidIdTokenError, ValueError) as e:
            logger.warning("Token Firebase inválido", error=str(e))
            raise InvalidTokenError()
        except FirebaseError as e:
            logger.error("Erro Firebase", error=str(e))
            raise IdentityProviderError()

        logger.debug("Token Firebase verificado", uid=decoded_token.get("uid"))
        return decoded_token

    async def email_exists(self, email: str) -> bool:
        """Indica se o e-mail já está cadastrado no Firebase."""
        try:
            auth.get_user_by_email(email, app=self.app)
            return True
        except auth.UserNotFoundError:
            return False
        except FirebaseError as e:
            logger.error("Erro ao buscar usuário Firebase", error=str(e))
            raise IdentityProviderError()

    async def create_user(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        email_verified: bool = False,
    ) -> str:
        """
        Cria usuário no Firebase.

        Returns:
            UID do novo usuário
        """
        try:
            user = auth.create_user(
                email=email,
                password=password,
                display_name=display_name,
                email_verified=email_verified,
                disabled=False,
                app=self.app,
            )
        except auth.EmailAlreadyExistsError:
            raise EmailAlreadyInUseError(email)
        except FirebaseError as e:
            logger.error("Erro ao criar usuário Firebase", error=str(e))
            raise IdentityProviderError()

        logger.info("Usuário criado no Firebase", uid=user.uid)
        return user.uid

    async def update_user(self, uid: str, **kwargs: Any) -> None:
        """Atualiza dados do usuário no Firebase (password, email, display_name...)."""
        try:
            auth.update_user(uid, app=self.app, **kwargs)
        except auth.EmailAlreadyExistsError:
            raise EmailAlreadyInUseError(kwargs.get("email", ""))
        except FirebaseError as e:
            logger.error("Erro ao atualizar usuário Firebase", error=str(e))
            raise IdentityProviderError()
        logger.info("Usuário atualizado no Firebase", uid=uid, campos=sorted(kwargs))

    async def delete_user(self, uid: str) -> None:
        """Remove usuário do Firebase."""
        try:
            auth.delete_user(uid, app=self.app)
        except FirebaseError as e:
            logger.error("Erro ao remover usuário Firebase", error=str(e))
            raise IdentityProviderError()
        logger.info("Usuário removido do Firebase", uid=uid)

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        """
        Autentica com e-mail e senha.

        Returns:
            Dict com idToken, refreshToken, expiresIn e localId (uid)
        """
        return await self._identity_toolkit(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )

    async def reauthenticate(self, uid: str, email: str, password: str) -> None:
        """Confirma a senha atual antes de alterações sensíveis."""
        result = await self.sign_in(email, password)
        if result.get("localId") != uid:
            raise AuthenticationError("Email ou senha inválidos")

    async def send_password_reset_email(self, email: str) -> None:
        """Envia e-mail de redefinição de senha."""
        try:
            await self._identity_toolkit(
                "accounts:sendOobCode",
                {"requestType": "PASSWORD_RESET", "email": email},
            )
        except TooManyAttemptsError:
            raise
        except AuthenticationError:
            raise ResourceNotFoundError("Usuário com este e-mail")
        logger.info("E-mail de redefinição enviado")

    async def _identity_toolkit(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        if not self._settings.FIREBASE_WEB_API_KEY:
            logger.error("FIREBASE_WEB_API_KEY não configurada")
            raise IdentityProviderError()

        url = f"{IDENTITY_TOOLKIT_URL}/{method}"
        params = {"key": self._settings.FIREBASE_WEB_API_KEY}
        try:
            if self._http is not None:
                response = await self._http.post(url, params=params, json=payload)
            else:
                async with httpx.AsyncClient(timeout=10.0) as client:
                    response = await client.post(url, params=params, json=payload)
        except httpx.HTTPError as e:
            logger.error("Erro de rede no Identity Toolkit", method=method, error=str(e))
            raise IdentityProviderError()

        if response.status_code == 200:
            return response.json()

        reason = self._error_reason(response)
        logger.warning("Identity Toolkit recusou a operação", method=method, reason=reason)
        if reason in _INVALID_CREDENTIALS:
            raise AuthenticationError("Email ou senha inválidos")
        if reason == "TOO_MANY_ATTEMPTS_TRY_LATER":
            raise TooManyAttemptsError()
        raise IdentityProviderError()

    @staticmethod
    def _error_reason(response: httpx.Response) -> str:
        try:
            message = response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return "UNKNOWN"
        # Ex.: "TOO_MANY_ATTEMPTS_TRY_LATER : Access to this account..."
        return message.split(" ")[0]
