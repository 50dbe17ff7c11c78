from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from modreports.database import Base
from modreports.crud import post_report as post_report_crud
from modreports.errors import StoreUnavailable
from modreports.models import Community, Person, Post, PostReport


@pytest.fixture
def db_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def post_with_reports(db_session):
    db = db_session
    author = Person(name="author")
    mod = Person(name="mod")
    reporters = [Person(name=f"reporter_{i}") for i in range(3)]
    community = Community(name="c", title="C")
    db.add_all([author, mod, community, *reporters])
    db.flush()

    post = Post(name="reported", creator_id=author.id, community_id=community.id)
    other_post = Post(name="untouched", creator_id=author.id, community_id=community.id)
    db.add_all([post, other_post])
    db.flush()

    reports = [
        PostReport(creator_id=r.id, post_id=post.id, original_post_name=post.name, reason="bad")
        for r in reporters
    ]
    other_report = PostReport(
        creator_id=reporters[0].id,
        post_id=other_post.id,
        original_post_name=other_post.name,
        reason="also bad",
    )
    db.add_all([*reports, other_report])
    db.commit()
    return {"mod": mod, "post": post, "reports": reports, "other_report": other_report}


def test_resolve_all_for_object_marks_every_open_report(db_session, post_with_reports):
    mod = post_with_reports["mod"]
    post = post_with_reports["post"]

    updated = post_report_crud.resolve_all_for_object(db_session, post.id, mod.id)
    assert updated == 3

    for report in post_with_reports["reports"]:
        stored = post_report_crud.get_post_report(db_session, report.id)
        assert stored.resolved is True
        assert stored.resolver_id == mod.id
        assert stored.updated is not None

    other = post_report_crud.get_post_report(db_session, post_with_reports["other_report"].id)
    assert other.resolved is False
    assert other.resolver_id is None


def test_resolve_all_for_object_is_idempotent(db_session, post_with_reports):
    mod = post_with_reports["mod"]
    post = post_with_reports["post"]

    assert post_report_crud.resolve_all_for_object(db_session, post.id, mod.id) == 3
    assert post_report_crud.resolve_all_for_object(db_session, post.id, mod.id) == 0


def test_resolve_all_for_object_skips_already_resolved(db_session, post_with_reports):
    mod = post_with_reports["mod"]
    first = post_with_reports["reports"][0]

    assert post_report_crud.resolve(db_session, first.id, mod.id) == 1
    assert post_report_crud.resolve_all_for_object(db_session, post_with_reports["post"].id, mod.id) == 2


def test_resolve_and_unresolve_single_report(db_session, post_with_reports):
    mod = post_with_reports["mod"]
    report = post_with_reports["reports"][1]

    assert post_report_crud.resolve(db_session, report.id, mod.id) == 1
    stored = post_report_crud.get_post_report(db_session, report.id)
    assert stored.resolved is True
    assert stored.resolver_id == mod.id

    assert post_report_crud.unresolve(db_session, report.id) == 1
    stored = post_report_crud.get_post_report(db_session, report.id)
    assert stored.resolved is False
    assert stored.resolver_id is None


def test_resolve_missing_report_updates_nothing(db_session, post_with_reports):
    assert post_report_crud.resolve(db_session, 9999, post_with_reports["mod"].id) == 0
    assert post_report_crud.get_post_report(db_session, 9999) is None


def test_one_report_per_creator_and_post(db_session, post_with_reports):
    existing = post_with_reports["reports"][0]
    db_session.add(PostReport(
        creator_id=existing.creator_id,
        post_id=existing.post_id,
        original_post_name="again",
        reason="twice",
    ))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_resolve_all_for_object_on_unreachable_store(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'reports.db'}")
    db = sessionmaker(bind=engine)()
    try:
        with pytest.raises(StoreUnavailable):
            post_report_crud.resolve_all_for_object(db, 1, 1)

        # Rolled back, so the session takes the next call instead of
        # demanding a rollback first
        assert db.is_active
        assert not db.in_transaction()
        with pytest.raises(StoreUnavailable):
            post_report_crud.resolve_all_for_object(db, 1, 1)
    finally:
        db.close()
