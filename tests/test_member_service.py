from datetime import date, datetime, timedelta

from integration.models.member import Gender
from integration.services.family_service import (
    create_family,
    delete_family,
    get_family_with_details,
    list_families,
)
from integration.services.follow_up_service import update_member_follow_up, get_member_for_follow_up
from integration.services.member_service import (
    create_member,
    delete_member,
    paginate_members,
    update_member,
)
from integration.services.user_service import delete_user, list_users


def _register(db, first_name, last_name="Martin", gender=Gender.FEMALE, **extra):
    return create_member(
        db,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}@example.com",
        phone="0612345678",
        date_of_birth=date(2009, 1, 1),
        gender=gender,
        address="5 allée Jean Jaurès, Toulouse",
        **extra,
    )


def test_registration_starts_unassigned(db):
    m = _register(db, "Lea", parent_name="", notes="", latitude=43.6, longitude=1.44)
    assert m.family_id is None
    assert m.is_contacted is False
    assert m.registration_date is not None
    assert m.parent_name is None and m.notes is None
    assert m.has_coordinates


def test_update_keeps_birth_date_unless_given(db):
    m = _register(db, "Lea")
    update_member(db, member_id=m.id, first_name="Léa", date_of_birth=None, notes="")
    assert m.first_name == "Léa"
    assert m.date_of_birth == date(2009, 1, 1)
    assert m.notes is None
    assert update_member(db, member_id="missing", first_name="x") is None


def test_delete_member(db):
    m = _register(db, "Lea")
    assert delete_member(db, m.id) is True
    assert delete_member(db, m.id) is False


def test_pagination_metadata(db):
    for i in range(25):
        _register(db, f"Person{i:02d}")

    members, meta = paginate_members(db, page=3, page_size=10)

    assert len(members) == 5
    assert meta == {
        "total": 25,
        "page": 3,
        "page_size": 10,
        "total_pages": 3,
        "has_next_page": False,
        "has_prev_page": True,
    }


def test_pagination_newest_first(db):
    old = _register(db, "Old")
    new = _register(db, "New")
    old.registration_date = datetime(2024, 1, 1, 12, 0)
    new.registration_date = datetime(2025, 1, 1, 12, 0)
    db.commit()

    members, _ = paginate_members(db)

    assert [m.id for m in members] == [new.id, old.id]


def test_search_and_gender_filters(db):
    _register(db, "Alice", last_name="Durand")
    _register(db, "Bob", last_name="Bernard", gender=Gender.MALE)
    _register(db, "Chloe", last_name="Petit")

    by_name, meta = paginate_members(db, query="durand")
    assert [m.first_name for m in by_name] == ["Alice"]
    assert meta["total"] == 1

    males, _ = paginate_members(db, gender="male")
    assert [m.first_name for m in males] == ["Bob"]

    everyone, _ = paginate_members(db, gender="all")
    assert len(everyone) == 3


def test_date_range_includes_whole_end_day(db):
    inside = _register(db, "Inside")
    outside = _register(db, "Outside")
    inside.registration_date = datetime(2026, 3, 10, 23, 30)
    outside.registration_date = datetime(2026, 3, 11, 0, 30)
    db.commit()

    members, _ = paginate_members(db, start_date=date(2026, 3, 1), end_date=date(2026, 3, 10))

    assert [m.first_name for m in members] == ["Inside"]


def test_empty_page_metadata(db):
    members, meta = paginate_members(db)
    assert members == []
    assert meta["total_pages"] == 0
    assert meta["has_next_page"] is False
    assert meta["has_prev_page"] is False


def test_delete_family_detaches_members(db, make_family):
    fam = make_family()
    m = _register(db, "Lea")
    m.family_id = fam.id
    db.commit()

    assert delete_family(db, fam.id) is True

    db.refresh(m)
    assert m.family_id is None
    assert list_families(db) == []


def test_family_details_lists_available_members(db, make_family):
    fam = make_family()
    assigned_b = _register(db, "Bea", last_name="Zola")
    assigned_a = _register(db, "Ana", last_name="Adam")
    free = _register(db, "Free", last_name="Libre")
    for m in (assigned_a, assigned_b):
        m.family_id = fam.id
    db.commit()

    family, available = get_family_with_details(db, fam.id)

    assert [m.last_name for m in family.members] == ["Adam", "Zola"]
    assert [m.id for m in available] == [free.id]
    assert get_family_with_details(db, "missing") is None


def test_create_family_treats_blank_leaders_as_none(db):
    fam = create_family(db, name="Famille Carmes", address="Place des Carmes", pilote_id="", copilote_id="")
    assert fam.pilote_id is None and fam.copilote_id is None


def test_deleting_leader_clears_both_roles(db, make_leader, make_family):
    leader = make_leader()
    other = make_leader(first_name="Zoe", last_name="Zeller")
    fam_a = make_family(name="A", pilote=leader, copilote=other)
    fam_b = make_family(name="B", pilote=other, copilote=leader)

    assert delete_user(db, leader.id) is True

    db.refresh(fam_a)
    db.refresh(fam_b)
    assert fam_a.pilote_id is None and fam_a.copilote_id == other.id
    assert fam_b.pilote_id == other.id and fam_b.copilote_id is None
    assert [u.id for u in list_users(db)] == [other.id]


def test_follow_up_sets_and_clears_contact_date(db, make_family):
    fam = make_family()
    m = _register(db, "Lea")
    m.family_id = fam.id
    db.commit()

    result = update_member_follow_up(db, member_id=m.id, is_contacted=True, leader_notes="Appelée dimanche")
    assert result.success
    followed = get_member_for_follow_up(db, m.id)
    assert followed.is_contacted is True
    assert followed.leader_notes == "Appelée dimanche"
    assert followed.contact_date is not None
    assert followed.family.name == fam.name

    update_member_follow_up(db, member_id=m.id, is_contacted=False, leader_notes="")
    db.refresh(m)
    assert m.contact_date is None


def test_follow_up_unknown_member(db):
    result = update_member_follow_up(db, member_id="missing", is_contacted=True, leader_notes="")
    assert result.success is False
    assert result.error == "Member not found"
