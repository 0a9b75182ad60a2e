import logging
from typing import Optional

from pydantic import BaseModel, Field

from flask import jsonify
from flask_openapi3 import Info, Tag
from flask_openapi3 import OpenAPI

from curve_pricing.common.errors import (
    ArithmeticOverflow,
    InvalidValue,
    NotOwner,
    PricingError,
    ZeroDenominator,
    ZeroNumerator,
)
from curve_pricing.config.settings import get_settings
from curve_pricing.curves.linear import PricingEngine


logger = logging.getLogger(__name__)

info = Info(title="Bonding Curve Pricing API", version="1.0.0")

ERROR_STATUS = {
    NotOwner: 403,
    ZeroNumerator: 400,
    ZeroDenominator: 400,
    InvalidValue: 400,
    ArithmeticOverflow: 422,
}


class PriceQuery(BaseModel):
    total_supply: int = Field(description="Current circulating supply")
    amount: int = Field(1, description="Requested purchase quantity")


class SetValueBody(BaseModel):
    value: int = Field(description="New parameter value")
    caller: str = Field(description="Account performing the change")


class TransferOwnershipBody(BaseModel):
    new_owner: Optional[str] = Field(None, description="New owner, or null to renounce")
    caller: str = Field(description="Account performing the change")


curve_read_tag = Tag(
    name="Bonding Curve Status",
    description="Read the curve configuration, quote prices and list change notifications",
)

curve_admin_tag = Tag(
    name="Bonding Curve Configuration",
    description="Owner-only updates of the curve parameters",
)


def _engine_from_settings() -> PricingEngine:
    settings = get_settings()
    return PricingEngine.from_config(settings.curve_config, settings.owner)


def create_app(engine: Optional[PricingEngine] = None) -> OpenAPI:
    """
    Builds an API serving a single pricing engine. When no engine is given, one is
    deployed from the environment settings.
    """
    engine = engine if engine is not None else _engine_from_settings()
    app = OpenAPI(__name__, info=info)
    app.config["PRICING_ENGINE"] = engine

    @app.errorhandler(PricingError)
    def handle_pricing_error(e: PricingError):
        status = ERROR_STATUS.get(type(e), 400)
        logger.info("Request rejected with %s (%d)", e.code, status)
        return jsonify(e.to_dict()), status

    def _config_response():
        payload = engine.config.to_dict()
        payload["owner"] = engine.owner
        return jsonify(payload)

    @app.get("/curve/config", summary="Curve Configuration", tags=[curve_read_tag])
    def config():
        """
        Return the current initial price, slope numerator and denominator, and owner.
        """
        return _config_response()

    @app.get("/curve/price", summary="Curve Price", tags=[curve_read_tag])
    def price(query: PriceQuery):
        """
        Return the unit price for buying 'amount' tokens at 'total_supply'.
        """
        result = engine.calculate_price(query.total_supply, query.amount)
        return jsonify({"total_supply": query.total_supply, "amount": query.amount, "price": result})

    @app.get("/curve/events", summary="Curve Events", tags=[curve_read_tag])
    def events():
        """
        Return every recorded configuration change, oldest first.
        """
        return jsonify([event.to_dict() for event in engine.events])

    @app.post("/curve/initial-price", summary="Set Initial Price", tags=[curve_admin_tag])
    def set_initial_price(body: SetValueBody):
        engine.set_initial_price(body.value, body.caller)
        return _config_response()

    @app.post("/curve/slope-numerator", summary="Set Slope Numerator", tags=[curve_admin_tag])
    def set_slope_numerator(body: SetValueBody):
        engine.set_slope_numerator(body.value, body.caller)
        return _config_response()

    @app.post("/curve/slope-denominator", summary="Set Slope Denominator", tags=[curve_admin_tag])
    def set_slope_denominator(body: SetValueBody):
        engine.set_slope_denominator(body.value, body.caller)
        return _config_response()

    @app.post("/curve/owner", summary="Transfer Ownership", tags=[curve_admin_tag])
    def transfer_ownership(body: TransferOwnershipBody):
        engine.transfer_ownership(body.new_owner, body.caller)
        return _config_response()

    return app


def main():
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)


if __name__ == "__main__":
    main()
