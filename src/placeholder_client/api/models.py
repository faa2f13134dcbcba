"""
API Entities

Immutable snapshots of the JSONPlaceholder resources. Field names are
snake_case; from_dict/to_dict translate to the API's camelCase keys.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _require_mapping(data: Any, entity: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{entity} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Geo:
    """Latitude/longitude pair embedded in an address."""
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Geo":
        # The API sends coordinates as numeric strings
        data = _require_mapping(data, "Geo")
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Address:
    """Postal address of a user."""
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        data = _require_mapping(data, "Address")
        return cls(
            street=data["street"],
            suite=data["suite"],
            city=data["city"],
            zipcode=data["zipcode"],
            geo=Geo.from_dict(data["geo"])
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "street": self.street,
            "suite": self.suite,
            "city": self.city,
            "zipcode": self.zipcode,
            "geo": self.geo.to_dict(),
        }


@dataclass(frozen=True)
class Company:
    """Employer of a user."""
    name: str
    catch_phrase: str
    bs: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Company":
        data = _require_mapping(data, "Company")
        return cls(
            name=data["name"],
            catch_phrase=data["catchPhrase"],
            bs=data["bs"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "catchPhrase": self.catch_phrase, "bs": self.bs}


@dataclass(frozen=True)
class User:
    """
    A user resource.

    ``id`` is None for a user that has not been created yet; it is then
    left out of the encoded JSON so the service assigns one.
    """
    name: str
    username: str
    email: str
    address: Address
    phone: str
    website: str
    company: Company
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        data = _require_mapping(data, "User")
        user_id = data.get("id")
        return cls(
            id=int(user_id) if user_id is not None else None,
            name=data["name"],
            username=data["username"],
            email=data["email"],
            address=Address.from_dict(data["address"]),
            phone=data["phone"],
            website=data["website"],
            company=Company.from_dict(data["company"])
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        result.update({
            "name": self.name,
            "username": self.username,
            "email": self.email,
            "address": self.address.to_dict(),
            "phone": self.phone,
            "website": self.website,
            "company": self.company.to_dict(),
        })
        return result


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    id: int
    user_id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        data = _require_mapping(data, "Post")
        return cls(
            id=int(data["id"]),
            user_id=int(data["userId"]),
            title=data["title"],
            body=data["body"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "id": self.id, "title": self.title, "body": self.body}


@dataclass(frozen=True)
class Comment:
    """A comment attached to a post."""
    id: int
    post_id: int
    name: str
    email: str
    body: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        data = _require_mapping(data, "Comment")
        return cls(
            id=int(data["id"]),
            post_id=int(data["postId"]),
            name=data["name"],
            email=data["email"],
            body=data["body"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "postId": self.post_id,
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "body": self.body,
        }


@dataclass(frozen=True)
class Todo:
    """A todo item owned by a user."""
    id: int
    user_id: int
    title: str
    completed: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        data = _require_mapping(data, "Todo")
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise TypeError(f"Todo.completed must be a boolean, got {completed!r}")
        return cls(
            id=int(data["id"]),
            user_id=int(data["userId"]),
            title=data["title"],
            completed=completed
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id, "id": self.id, "title": self.title, "completed": self.completed}
