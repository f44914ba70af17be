"""HTTP adapter schemas for hypermedia responses."""

from pydantic import BaseModel, Field

from pricing_service.application.dtos.price import PriceResponse
from pricing_service.domain.entities.price import Price

Links = dict[str, dict[str, str]]


class PriceResource(PriceResponse):
    """Price response with hypermedia links."""

    links: Links = Field(serialization_alias="_links")

    @classmethod
    def from_price(cls, price: Price) -> "PriceResource":
        """Build a linked resource from a Price entity."""
        return cls(
            **PriceResponse.from_domain(price).model_dump(),
            links={
                "self": {"href": f"/price/{price.id}"},
                "price": {"href": f"/price/{price.id}"},
            },
        )


class PriceCollection(BaseModel):
    """Collection of prices, embedded under ``price``."""

    embedded: dict[str, list[PriceResource]] = Field(serialization_alias="_embedded")
    links: Links = Field(serialization_alias="_links")

    @classmethod
    def from_prices(cls, prices: list[Price]) -> "PriceCollection":
        """Build a linked collection from Price entities."""
        return cls(
            embedded={"price": [PriceResource.from_price(price) for price in prices]},
            links={"self": {"href": "/price"}},
        )
