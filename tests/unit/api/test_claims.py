from datetime import timedelta

from jose import jwt

from src.api.utils.jwt import Claims, ClaimsExtractor, generate_jwt
from src.domain.entities import PermissionTier

SECRET = "unit-test-secret"


def extractor() -> ClaimsExtractor:
    return ClaimsExtractor("HS256", SECRET)


def test_valid_token_yields_typed_claims():
    token = generate_jwt(tenant_id=42, tier="projrw", secret=SECRET)

    result = extractor().extract(token)

    assert result.is_ok()
    assert result.value == Claims(tenant_id=42, tier=PermissionTier.read_write)


def test_expired_token():
    token = generate_jwt(42, "projadmin", SECRET, expires_delta=timedelta(minutes=-5))

    result = extractor().extract(token)

    assert result.error.code == "TOKEN_EXPIRED"
    assert result.error.message == "token expired"


def test_wrong_signature_and_missing_token():
    token = generate_jwt(42, "projadmin", "another-secret")

    assert extractor().extract(token).error.code == "UNAUTHORIZED"
    assert extractor().extract(None).error.code == "UNAUTHORIZED"
    assert extractor().extract("not-a-jwt").error.code == "UNAUTHORIZED"


def test_absent_or_mistyped_claims_default():
    token = jwt.encode({"aid": "42", "projsvc": "superuser"}, SECRET, algorithm="HS256")

    claims = extractor().extract(token).value

    assert claims.tenant_id == 0
    assert claims.tier is None


def test_tier_ordering():
    admin, rw, ro = PermissionTier.admin, PermissionTier.read_write, PermissionTier.read_only

    assert admin.satisfies(rw) and admin.satisfies(ro)
    assert rw.satisfies(ro) and not rw.satisfies(admin)
    assert not ro.satisfies(rw)
    assert PermissionTier.parse("projro") is ro
    assert PermissionTier.parse(3) is None
