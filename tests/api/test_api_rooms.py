"""
Room API tests
Covers /rooms and /room-types
"""
from fastapi.testclient import TestClient

from hotelpms.models.tables import Room, RoomStatus


class TestRoomTypes:

    def test_list_ordered_by_name(self, client: TestClient, auth_headers,
                                  sample_room_type_family, sample_room_type):
        response = client.get("/room-types", headers=auth_headers)

        assert response.status_code == 200
        assert [rt["name"] for rt in response.json()] == ["Double", "Family"]

    def test_create_room_type(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post(
            "/room-types",
            json={"name": "Suite", "capacity": 3, "base_price": "250.00"},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["hotel_id"] == sample_hotel.id
        assert response.json()["capacity"] == 3

    def test_update_room_type(self, client: TestClient, auth_headers, sample_room_type):
        response = client.put(
            f"/room-types/{sample_room_type.id}",
            json={"capacity": 3},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["capacity"] == 3
        assert response.json()["name"] == "Double"

    def test_null_fields_left_unchanged(self, client: TestClient, auth_headers, sample_room_type):
        response = client.put(
            f"/room-types/{sample_room_type.id}",
            json={"name": None, "base_price": None, "description": None},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Double"
        assert response.json()["description"] is None
        assert client.get("/room-types", headers=auth_headers).status_code == 200

    def test_delete_room_type_in_use(self, client: TestClient, auth_headers, sample_room, sample_room_type):
        response = client.delete(f"/room-types/{sample_room_type.id}", headers=auth_headers)

        assert response.status_code == 400
        assert "still use this room type" in response.json()["detail"]

    def test_delete_unused_room_type(self, client: TestClient, auth_headers, sample_room_type):
        response = client.delete(f"/room-types/{sample_room_type.id}", headers=auth_headers)

        assert response.status_code == 200


class TestRooms:

    def test_list_rooms_with_type_and_placeholder(self, client: TestClient, auth_headers, sample_room):
        response = client.get("/rooms", headers=auth_headers)

        assert response.status_code == 200
        room = response.json()[0]
        assert room["room_number"] == "101"
        assert room["image_url"] == "/stock-hotel-room.jpg"
        assert room["room_type"]["name"] == "Double"
        assert room["room_type"]["capacity"] == 2

    def test_view_mode_echoed(self, client: TestClient, auth_headers, sample_room):
        response = client.get("/rooms?view=list", headers=auth_headers)

        assert response.status_code == 200
        assert response.headers["X-View-Mode"] == "list"

    def test_rooms_ordered_by_number(self, client: TestClient, auth_headers, sample_hotel,
                                     sample_room_type, db_session):
        for number in ("203", "102", "110"):
            db_session.add(Room(hotel_id=sample_hotel.id, room_number=number,
                                floor=number[0], room_type_id=sample_room_type.id))
        db_session.commit()

        numbers = [r["room_number"] for r in client.get("/rooms", headers=auth_headers).json()]

        assert numbers == ["102", "110", "203"]

    def test_available_rooms(self, client: TestClient, auth_headers, sample_room, sample_hotel,
                             sample_room_type, db_session):
        db_session.add(Room(hotel_id=sample_hotel.id, room_number="102", floor="1",
                            room_type_id=sample_room_type.id, status=RoomStatus.MAINTENANCE))
        db_session.commit()

        response = client.get("/rooms/available", headers=auth_headers)

        assert [r["room_number"] for r in response.json()] == ["101"]

    def test_create_room(self, client: TestClient, auth_headers, sample_room_type):
        response = client.post(
            "/rooms",
            json={"room_number": "201", "floor": "2", "room_type_id": sample_room_type.id},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "available"

    def test_duplicate_room_number(self, client: TestClient, auth_headers, sample_room, sample_room_type):
        response = client.post(
            "/rooms",
            json={"room_number": "101", "floor": "1", "room_type_id": sample_room_type.id},
            headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Room number '101' already exists"

    def test_unknown_room_type(self, client: TestClient, auth_headers, sample_hotel):
        response = client.post(
            "/rooms",
            json={"room_number": "301", "floor": "3", "room_type_id": "missing"},
            headers=auth_headers
        )

        assert response.status_code == 400

    def test_update_room_status(self, client: TestClient, auth_headers, sample_room):
        response = client.put(f"/rooms/{sample_room.id}", json={"status": "occupied"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["status"] == "occupied"

    def test_delete_room(self, client: TestClient, auth_headers, sample_room):
        response = client.delete(f"/rooms/{sample_room.id}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get(f"/rooms/{sample_room.id}", headers=auth_headers).status_code == 404

    def test_room_photo_upload(self, client: TestClient, auth_headers, sample_room, fake_uploader):
        response = client.put(
            f"/rooms/{sample_room.id}/image",
            files={"file": ("room-101.jpg", b"jpeg-bytes", "image/jpeg")},
            headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["image_url"].endswith("/room-101.jpg")
        assert fake_uploader.uploads == [("room-101.jpg", b"jpeg-bytes", "image/jpeg")]

    def test_room_photo_missing_file(self, client: TestClient, auth_headers, sample_room):
        response = client.put(f"/rooms/{sample_room.id}/image", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_room_photo_unknown_room(self, client: TestClient, auth_headers, sample_hotel, fake_uploader):
        response = client.put(
            "/rooms/unknown/image",
            files={"file": ("room.jpg", b"jpeg-bytes", "image/jpeg")},
            headers=auth_headers
        )

        assert response.status_code == 404
        assert fake_uploader.uploads == []
