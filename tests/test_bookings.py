from .conftest import alice_signup, sign_up_and_in

haircut = {"date": "2024-01-02", "time": "09:00", "service": "haircut"}
wash = {"date": "2024-01-01", "time": "10:00", "service": "wash"}


class TestCreateBooking:

    def test_create_booking(self, client, alice_headers):
        response = client.post("/bookings", json=haircut, headers=alice_headers)
        assert response.status_code == 201

        data = response.json()
        assert data["message"] == "Booking created successfully!"

        booking = data["booking"]
        assert isinstance(booking["id"], int)
        assert booking["date"] == "2024-01-02"
        assert booking["time"] == "09:00"
        assert booking["service"] == "haircut"
        assert isinstance(booking["userId"], int)

    def test_identical_bookings_are_both_stored(self, client, alice_headers):
        first = client.post("/bookings", json=haircut, headers=alice_headers).json()
        second = client.post("/bookings", json=haircut, headers=alice_headers).json()

        assert first["booking"]["id"] != second["booking"]["id"]
        assert len(client.get("/bookings", headers=alice_headers).json()) == 2

    def test_create_booking_missing_field(self, client, alice_headers):
        response = client.post(
            "/bookings",
            json={"date": "2024-01-02", "time": "09:00"},
            headers=alice_headers,
        )
        assert response.status_code == 422

    def test_create_booking_without_token(self, client):
        response = client.post("/bookings", json=haircut)
        assert response.status_code == 401

    def test_create_booking_with_malformed_token(self, client):
        response = client.post(
            "/bookings",
            json=haircut,
            headers={"Authorization": "Bearer not.a.token"},
        )
        assert response.status_code == 403


class TestListBookings:

    def test_booking_flow(self, client):
        """Sign up, sign in, book twice and read the bookings back in date order."""
        assert client.post("/signup", json=alice_signup).status_code == 201
        assert client.post("/signup", json=alice_signup).status_code == 409

        response = client.post("/signin", json={"email": "a@x.com", "password": "wrong"})
        assert response.status_code == 401

        response = client.post("/signin", json={"email": "a@x.com", "password": "pw1"})
        assert response.status_code == 200
        headers = {"Authorization": f"Bearer {response.json()['token']}"}

        assert client.post("/bookings", json=haircut, headers=headers).status_code == 201
        assert client.post("/bookings", json=wash, headers=headers).status_code == 201

        response = client.get("/bookings", headers=headers)
        assert response.status_code == 200

        bookings = response.json()
        assert [b["service"] for b in bookings] == ["wash", "haircut"]
        assert [b["date"] for b in bookings] == ["2024-01-01", "2024-01-02"]

    def test_list_sorted_by_date_then_time(self, client, alice_headers):
        slots = [
            ("2024-03-01", "14:00"),
            ("2024-02-15", "16:30"),
            ("2024-03-01", "08:15"),
            ("2024-02-15", "09:00"),
            ("2024-01-31", "23:59"),
        ]
        for date, time in slots:
            client.post(
                "/bookings",
                json={"date": date, "time": time, "service": "massage"},
                headers=alice_headers,
            )

        bookings = client.get("/bookings", headers=alice_headers).json()
        keys = [(b["date"], b["time"]) for b in bookings]
        assert keys == sorted(slots)

    def test_list_only_own_bookings(self, client, alice_headers, bob_headers):
        client.post("/bookings", json=haircut, headers=alice_headers)
        client.post("/bookings", json=wash, headers=bob_headers)
        client.post("/bookings", json=wash, headers=alice_headers)

        alice_bookings = client.get("/bookings", headers=alice_headers).json()
        bob_bookings = client.get("/bookings", headers=bob_headers).json()

        assert len(alice_bookings) == 2
        assert len(bob_bookings) == 1
        assert len({b["userId"] for b in alice_bookings}) == 1
        assert bob_bookings[0]["userId"] not in {b["userId"] for b in alice_bookings}

    def test_list_empty(self, client):
        headers = sign_up_and_in(client, alice_signup)

        response = client.get("/bookings", headers=headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_without_token(self, client):
        response = client.get("/bookings")
        assert response.status_code == 401
        assert response.json() == {"message": "Authentication token required."}

    def test_list_with_malformed_token(self, client):
        response = client.get("/bookings", headers={"Authorization": "Bearer invalid_token"})
        assert response.status_code == 403
        assert response.json() == {"message": "Invalid or expired token."}
