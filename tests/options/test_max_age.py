from datetime import timedelta

from claimmint.clock import FixedClock
from claimmint.options import (
    MaxAge,
    SignOption,
    SignOptionFunc,
    apply_sign_options,
    max_age_map,
)
from claimmint.schema import Claims


def test_max_age_sets_expiry_and_issued_at(clock: FixedClock) -> None:
    now = int(clock().timestamp())
    dest = Claims()
    MaxAge(timedelta(seconds=2), clock=clock).apply_claims(dest)
    assert dest.issued_at == now
    assert dest.expiry == now + 2


def test_max_age_overwrites(clock: FixedClock) -> None:
    now = int(clock().timestamp())
    dest = Claims(issued_at=1, expiry=2)
    MaxAge(timedelta(minutes=15), clock=clock).apply_claims(dest)
    assert dest.issued_at == now
    assert dest.expiry == now + 900


def test_max_age_short_durations_are_ignored(clock: FixedClock) -> None:
    for max_age in (
        timedelta(milliseconds=500),
        timedelta(seconds=1),
        timedelta(0),
        timedelta(seconds=-30),
    ):
        dest = Claims(subject="user@gmail.com")
        MaxAge(max_age, clock=clock).apply_claims(dest)
        assert dest == Claims(subject="user@gmail.com")


def test_max_age_map(clock: FixedClock) -> None:
    now = int(clock().timestamp())
    claims = {"foo": "bar"}
    max_age_map(timedelta(minutes=15), claims, clock=clock)
    assert claims == {"foo": "bar", "exp": now + 900, "iat": now}


def test_max_age_map_keeps_explicit_expiry(clock: FixedClock) -> None:
    """An "exp" already in the map is never replaced."""
    claims = {"exp": 999}
    max_age_map(timedelta(minutes=15), claims, clock=clock)
    assert claims == {"exp": 999}

    claims = {"exp": 999}
    max_age_map(timedelta(days=365), claims, clock=clock)
    assert claims == {"exp": 999}


def test_max_age_map_no_op(clock: FixedClock) -> None:
    max_age_map(timedelta(minutes=15), None, clock=clock)

    claims = {"foo": "bar"}
    max_age_map(timedelta(milliseconds=500), claims, clock=clock)
    assert claims == {"foo": "bar"}


def test_max_age_map_replaces_null_expiry(clock: FixedClock) -> None:
    now = int(clock().timestamp())
    claims = {"exp": None}
    max_age_map(timedelta(seconds=10), claims, clock=clock)
    assert claims == {"exp": now + 10, "iat": now}


def test_sign_options_apply_in_order(clock: FixedClock) -> None:
    now = int(clock().timestamp())

    def set_subject(dest: Claims) -> None:
        dest.subject = "from-func"

    claims = apply_sign_options(
        Claims(issuer="my-app", expiry=5),
        MaxAge(timedelta(minutes=1), clock=clock),
        SignOptionFunc(set_subject),
    )
    assert claims == Claims(
        issued_at=now,
        expiry=now + 60,
        issuer="my-app",
        subject="from-func",
    )

    # A later Claims option overrides the derived expiry.
    claims = apply_sign_options(
        MaxAge(timedelta(minutes=1), clock=clock),
        Claims(expiry=now + 5),
    )
    assert claims.expiry == now + 5


def test_apply_sign_options_onto_existing_claims() -> None:
    dest = Claims(subject="user@gmail.com")
    result = apply_sign_options(Claims(issuer="my-app"), dest=dest)
    assert result is dest
    assert dest == Claims(issuer="my-app", subject="user@gmail.com")


def test_sign_option_protocol(clock: FixedClock) -> None:
    assert isinstance(Claims(), SignOption)
    assert isinstance(MaxAge(timedelta(minutes=1), clock=clock), SignOption)
    assert isinstance(SignOptionFunc(lambda dest: None), SignOption)
