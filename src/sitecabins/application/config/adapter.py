"""Convert a validated LayoutConfiguration into domain objects."""

from sitecabins.application.config.loader import ConfigError
from sitecabins.application.config.schema import (
    CatalogueEntryConfig,
    LayoutConfiguration,
)
from sitecabins.domain import (
    DEFAULT_CATALOGUE,
    Catalogue,
    CatalogueEntry,
    UnitDimensions,
    Vec3,
    WorkingSet,
)


def config_to_catalogue_entry(entry: CatalogueEntryConfig) -> CatalogueEntry:
    return CatalogueEntry(
        sku=entry.sku,
        label=entry.label,
        dims=UnitDimensions(
            length=entry.dims.len, width=entry.dims.wid, height=entry.dims.ht
        ),
        weekly_rate=entry.weekly,
    )


def config_to_catalogue(
    config: LayoutConfiguration, base: Catalogue = DEFAULT_CATALOGUE
) -> Catalogue:
    """Build the catalogue for a layout: ``base`` plus the file's overrides.

    Raises:
        ConfigError: If the merged catalogue repeats a SKU.
    """
    if not config.catalogue:
        return base
    overrides = {
        unit_type: config_to_catalogue_entry(entry)
        for unit_type, entry in config.catalogue.items()
    }
    try:
        return base.merged(overrides)
    except ValueError as e:
        raise ConfigError(message=str(e), error_type="validation")


def config_to_working_set(
    config: LayoutConfiguration,
    base: Catalogue = DEFAULT_CATALOGUE,
    *,
    snap: bool = False,
) -> WorkingSet:
    """Populate a working set from the layout's items.

    Items with a type missing from the catalogue are dropped, the same as
    an interactive add of an unknown type. With ``snap`` set, positions are
    snapped to the layout's ``grid_step``.
    """
    working_set = WorkingSet(config_to_catalogue(config, base))
    for item_config in config.items:
        item = working_set.add(item_config.type, Vec3.from_sequence(item_config.position))
        if item is not None:
            working_set.update(item.id, yaw=item_config.yaw, color=item_config.color)
    if snap:
        working_set.snap_all(config.grid_step)
    return working_set
