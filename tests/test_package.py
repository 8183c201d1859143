"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import rideshare

    assert rideshare.__version__


def test_domain_module_imports() -> None:
    """Verify domain module exports."""
    from rideshare.domain import (
        Driver,
        DriverRegistry,
        RelationalQueries,
        Rider,
        RiderRegistry,
        Trip,
        TripRegistry,
    )

    assert Driver is not None
    assert Rider is not None
    assert Trip is not None
    assert DriverRegistry is not None
    assert RiderRegistry is not None
    assert TripRegistry is not None
    assert RelationalQueries is not None


def test_schemas_module_imports() -> None:
    """Verify schemas module exports."""
    from rideshare.schemas import (
        DriverRecordSchema,
        RiderRecordSchema,
        SchemaRegistry,
        TripRecordSchema,
    )

    assert DriverRecordSchema is not None
    assert RiderRecordSchema is not None
    assert TripRecordSchema is not None
    assert SchemaRegistry is not None
