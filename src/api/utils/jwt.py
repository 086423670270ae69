from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Mapping, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from src.domain.entities import PermissionTier
from src.libs.result import Error, Result, Return

TIER_CLAIM = "projsvc"
TENANT_CLAIM = "aid"


@dataclass(frozen=True)
class Claims:
    """
    Verified caller identity.

    Absent or mistyped claims fall back to tenant_id 0 and no tier, which
    never satisfies any tier requirement.
    """

    tenant_id: int = 0
    tier: Optional[PermissionTier] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Claims":
        tenant_id = payload.get(TENANT_CLAIM)
        if isinstance(tenant_id, bool) or not isinstance(tenant_id, (int, float)):
            tenant_id = 0
        return cls(
            tenant_id=int(tenant_id),
            tier=PermissionTier.parse(payload.get(TIER_CLAIM)),
        )


class ClaimsExtractor:
    """
    Decodes bearer tokens into Claims.

    HS* algorithms verify with the shared secret; RS*/PS*/ES* verify with
    the configured PEM public key.
    """

    def __init__(self, algorithm: str, key: str):
        self.algorithm = algorithm
        self.key = key

    @classmethod
    def from_config(cls, config) -> "ClaimsExtractor":
        algorithm = config.JWT_ALGORITHM
        if algorithm.startswith("HS"):
            return cls(algorithm, config.JWT_SECRET)
        with open(config.JWT_PUBLIC_KEY_FILE, "r") as key_file:
            return cls(algorithm, key_file.read())

    def extract(self, token: Optional[str]) -> Result[Claims]:
        """
        Verify and decode a token.

        Returns:
            Result with Claims, or Error(TOKEN_EXPIRED) for an expired token,
            or Error(UNAUTHORIZED) for a missing or invalid one
        """
        if not token:
            return Return.err(Error("UNAUTHORIZED", "not authorized", "missing token"))
        try:
            payload = jwt.decode(token, self.key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return Return.err(Error("TOKEN_EXPIRED", "token expired"))
        except JWTError as e:
            return Return.err(Error("UNAUTHORIZED", "not authorized", str(e)))
        return Return.ok(Claims.from_payload(payload))


def generate_jwt(
    tenant_id: int,
    tier: str,
    secret: str,
    expires_delta: timedelta = timedelta(minutes=15),
    algorithm: str = "HS256",
) -> str:
    """
    Generate a signed access token carrying the tenant and tier claims

    Args:
        tenant_id: account id placed in the aid claim
        tier: projadmin, projrw or projro
        secret: signing key
        expires_delta: token lifetime; negative values produce expired tokens
        algorithm: JWT signing algorithm

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        TENANT_CLAIM: tenant_id,
        TIER_CLAIM: tier,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)
