import datetime
import typing
import uuid

import strawberry


@strawberry.type
class Sensor:
    id: uuid.UUID
    name: str
    location: typing.Optional[str]
    macaddress: str
    created_at: datetime.datetime
    updated_at: datetime.datetime


@strawberry.type
class Book:
    title: str


@strawberry.input
class CreateBook:
    title: str


_created = datetime.datetime(2020, 9, 15, 7, 8, 54, 668686, tzinfo=datetime.timezone.utc)
_sensor_id = uuid.UUID("59de6057-e913-45e3-95b1-e628741443fd")

sensor_map: typing.Dict[uuid.UUID, Sensor] = {
    _sensor_id: Sensor(
        id=_sensor_id,
        name=f"unnamed-{_sensor_id}",
        location=None,
        macaddress="DC:A6:32:0B:62:37",
        created_at=_created,
        updated_at=_created,
    ),
}


@strawberry.type
class Query:
    @strawberry.field
    def api_version(self) -> str:
        return "1.0"

    @strawberry.field
    def sensor(self, id: uuid.UUID) -> typing.Optional[Sensor]:
        return sensor_map.get(id)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_book(self, book: CreateBook) -> Book:
        return Book(title=book.title)


schema = strawberry.Schema(query=Query, mutation=Mutation)

# run server
# $ python -m strawberry server graphql_server:schema
