import pytest

from hotel_reservations.domain import Hotel
from hotel_reservations.infrastructure import InMemoryHotelRepository
from hotel_reservations.shared_kernel import DuplicateNameException


class TestInMemoryHotelRepository:
    def test_add_and_get(self, repository: InMemoryHotelRepository, hotel: Hotel):
        repository.add(hotel)

        assert repository.get_by_id(hotel.id) is hotel
        assert len(repository.list_all()) == 1

    def test_find_by_name_ignores_case_and_spaces(
        self, repository: InMemoryHotelRepository, hotel: Hotel
    ):
        repository.add(hotel)

        assert repository.find_by_name("aurora") is hotel
        assert repository.find_by_name("  AURORA ") is hotel
        assert repository.find_by_name("Borealis") is None

    def test_add_same_hotel_twice(self, repository: InMemoryHotelRepository, hotel: Hotel):
        repository.add(hotel)

        with pytest.raises(ValueError, match="already exists"):
            repository.add(hotel)

    def test_add_duplicate_name(self, repository: InMemoryHotelRepository, hotel: Hotel):
        repository.add(hotel)

        with pytest.raises(DuplicateNameException):
            repository.add(Hotel.create("AURORA", room_count=1))
        assert len(repository.list_all()) == 1

    def test_list_all_keeps_insertion_order(self, repository: InMemoryHotelRepository):
        for name in ["Charlie", "Alpha", "Bravo"]:
            repository.add(Hotel.create(name, room_count=1))

        assert [h.name for h in repository.list_all()] == ["Charlie", "Alpha", "Bravo"]

    def test_name_taken(self, repository: InMemoryHotelRepository, hotel: Hotel):
        repository.add(hotel)

        assert repository.name_taken("AURORA")
        assert not repository.name_taken("AURORA", exclude=hotel.id)
        assert not repository.name_taken("Borealis")
