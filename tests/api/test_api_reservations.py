"""
Reservation API tests
Covers /reservations list, paging, calendar and the reservation form
"""
from datetime import datetime, timedelta
from decimal import Decimal
from fastapi.testclient import TestClient

from hotelpms.models.tables import Reservation, ReservationStatus


def _payload(**overrides):
    data = {
        "guest_name": "Ana Garcia",
        "guest_email": "ana@mail.test",
        "check_in": "2024-05-01T14:00:00",
        "check_out": "2024-05-03T11:00:00",
    }
    data.update(overrides)
    return data


def _make_reservation(db, hotel, check_in, nights=2, **kwargs):
    reservation = Reservation(
        hotel_id=hotel.id,
        guest_name=kwargs.pop("guest_name", "Guest"),
        guest_email=kwargs.pop("guest_email", "guest@mail.test"),
        check_in=check_in,
        check_out=check_in + timedelta(days=nights),
        **kwargs
    )
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation


class TestCreateReservation:

    def test_create_reservation_defaults(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post("/reservations", json=_payload(), headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["hotel_id"] == sample_hotel.id
        assert data["source"] == "direct"
        assert data["status"] == "pending"
        assert data["adults"] == 1
        assert data["children"] == 0

    def test_create_reservation_with_room(self, client: TestClient, auth_headers, sample_room):
        response = client.post(
            "/reservations",
            json=_payload(room_id=sample_room.id, total_price="240.00"),
            headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["room"]["room_number"] == "101"
        assert data["room"]["room_type"]["name"] == "Double"

    def test_check_out_before_check_in_rejected(self, client: TestClient, auth_headers, sample_hotel, db_session):
        response = client.post(
            "/reservations",
            json=_payload(check_in="2024-05-03T14:00:00", check_out="2024-05-01T11:00:00"),
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"
        assert db_session.query(Reservation).count() == 0

    def test_check_out_equal_to_check_in_rejected(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post(
            "/reservations",
            json=_payload(check_in="2024-05-01T14:00:00", check_out="2024-05-01T14:00:00"),
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_mixed_naive_and_offset_dates(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post(
            "/reservations",
            json=_payload(check_in="2026-05-01T14:00:00", check_out="2026-05-03T11:00:00+02:00"),
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["check_in"] == "2026-05-01T14:00:00"
        assert response.json()["check_out"] == "2026-05-03T09:00:00"

    def test_offset_check_out_compared_in_utc(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post(
            "/reservations",
            json=_payload(check_in="2026-05-01T14:00:00", check_out="2026-05-01T15:00:00+02:00"),
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_missing_guest_name_rejected(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post("/reservations", json=_payload(guest_name=""), headers=auth_headers)

        assert response.status_code == 422

    def test_room_of_other_hotel_rejected(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post("/reservations", json=_payload(room_id="unknown"), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Room not found"

    def test_requires_token(self, client: TestClient, sample_hotel):
        response = client.post("/reservations", json=_payload())

        assert response.status_code in (401, 403)

    def test_operator_without_hotel(self, client: TestClient, newcomer_headers):
        response = client.post("/reservations", json=_payload(), headers=newcomer_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "No hotel is associated with this user"


class TestListReservations:

    def test_ordered_by_check_in(self, client: TestClient, auth_headers, sample_hotel, db_session):
        _make_reservation(db_session, sample_hotel, datetime(2024, 6, 10, 14), guest_name="Later")
        _make_reservation(db_session, sample_hotel, datetime(2024, 6, 1, 14), guest_name="Sooner")

        response = client.get("/reservations", headers=auth_headers)

        assert response.status_code == 200
        assert [r["guest_name"] for r in response.json()] == ["Sooner", "Later"]

    def test_page_clamped(self, client: TestClient, auth_headers, sample_hotel, db_session):
        for day in range(1, 13):
            _make_reservation(db_session, sample_hotel, datetime(2024, 7, day, 14), nights=1)

        first = client.get("/reservations/page?page=1", headers=auth_headers).json()
        beyond = client.get("/reservations/page?page=9", headers=auth_headers).json()

        assert first["total"] == 12
        assert first["total_pages"] == 2
        assert len(first["items"]) == 10
        assert beyond["page"] == 2
        assert len(beyond["items"]) == 2

    def test_get_unknown_reservation(self, client: TestClient, auth_headers, sample_hotel):
        response = client.get("/reservations/nope", headers=auth_headers)

        assert response.status_code == 404


class TestUpdateReservation:

    def test_update_status(self, client: TestClient, auth_headers, sample_hotel, db_session):
        reservation = _make_reservation(db_session, sample_hotel, datetime(2024, 5, 1, 14))

        response = client.put(
            f"/reservations/{reservation.id}",
            json={"status": "confirmed", "total_price": "300.00"},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"
        assert Decimal(response.json()["total_price"]) == Decimal("300.00")

    def test_update_checks_merged_dates(self, client: TestClient, auth_headers, sample_hotel, db_session):
        reservation = _make_reservation(db_session, sample_hotel, datetime(2024, 5, 1, 14), nights=2)

        response = client.put(
            f"/reservations/{reservation.id}",
            json={"check_out": "2024-04-30T11:00:00"},
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_update_with_utc_check_out(self, client: TestClient, auth_headers, sample_hotel, db_session):
        reservation = _make_reservation(db_session, sample_hotel, datetime(2026, 5, 1, 14), nights=2)

        response = client.put(
            f"/reservations/{reservation.id}",
            json={"check_out": "2026-05-04T11:00:00Z"},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["check_out"] == "2026-05-04T11:00:00"
        db_session.refresh(reservation)
        assert reservation.check_out == datetime(2026, 5, 4, 11)

    def test_update_with_utc_check_out_before_check_in(self, client: TestClient, auth_headers,
                                                        sample_hotel, db_session):
        reservation = _make_reservation(db_session, sample_hotel, datetime(2026, 5, 1, 14), nights=2)

        response = client.put(
            f"/reservations/{reservation.id}",
            json={"check_out": "2026-05-01T15:00:00+03:00"},
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_delete_reservation(self, client: TestClient, auth_headers, sample_hotel, db_session):
        reservation = _make_reservation(db_session, sample_hotel, datetime(2024, 5, 1, 14))

        response = client.delete(f"/reservations/{reservation.id}", headers=auth_headers)

        assert response.status_code == 200
        assert client.delete(f"/reservations/{reservation.id}", headers=auth_headers).status_code == 404


class TestReservationCalendar:

    def test_month_view(self, client: TestClient, auth_headers, sample_hotel, db_session):
        _make_reservation(db_session, sample_hotel, datetime(2024, 5, 15, 14),
                          status=ReservationStatus.CONFIRMED)

        response = client.get("/reservations/calendar?view=month&date=2024-05-10", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "month"
        assert data["leading_blanks"] == 2  # 1 May 2024 is a Wednesday
        assert len(data["days"]) == 31
        day_15 = data["days"][14]
        assert day_15["reservations"][0]["status"] == "confirmed"
        assert data["previous"] == "2024-04-10"
        assert data["next"] == "2024-06-10"

    def test_week_view_with_step(self, client: TestClient, auth_headers, sample_hotel):
        response = client.get(
            "/reservations/calendar?view=week&date=2024-05-15&step=1",
            headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["start"] == "2024-05-20"
        assert data["end"] == "2024-05-26"
        assert len(data["days"]) == 7

    def test_day_view(self, client: TestClient, auth_headers, sample_hotel, db_session):
        _make_reservation(db_session, sample_hotel, datetime(2024, 5, 15, 9))

        data = client.get("/reservations/calendar?view=day&date=2024-05-15", headers=auth_headers).json()

        assert len(data["hours"]) == 24
        assert len(data["hours"][9]["reservations"]) == 1

    def test_unknown_view(self, client: TestClient, auth_headers, sample_hotel):
        response = client.get("/reservations/calendar?view=year", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Unknown calendar view: year"

    def test_step_out_of_bounds(self, client: TestClient, auth_headers, sample_hotel):
        response = client.get("/reservations/calendar?view=month&step=5000", headers=auth_headers)

        assert response.status_code == 422

    def test_date_beyond_last_year(self, client: TestClient, auth_headers, sample_hotel):
        response = client.get(
            "/reservations/calendar?view=month&date=9999-12-15&step=1",
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Calendar date out of range"
