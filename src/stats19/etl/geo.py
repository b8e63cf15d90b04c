import geopandas as gpd
from shapely.geometry import Point

OSGR_COLUMNS = ("location_easting_osgr", "location_northing_osgr")
LONLAT_COLUMNS = ("longitude", "latitude")


def format_sf(df, lonlat: bool = False):
    """
    Converts an accidents DataFrame to a GeoDataFrame.

    By default points come from the OSGR eastings/northings (EPSG:27700);
    with lonlat=True, or when no OSGR columns exist, from longitude/latitude
    (EPSG:4326). Rows without coordinates are dropped. The result is
    always in EPSG:4326.
    """
    has_osgr = all(c in df.columns for c in OSGR_COLUMNS)
    has_lonlat = all(c in df.columns for c in LONLAT_COLUMNS)

    if has_osgr and not (lonlat and has_lonlat):
        print("Converting to GeoDataFrame using OSGR...")
        x, y = OSGR_COLUMNS
        crs = "EPSG:27700"
    elif has_lonlat:
        print("Converting to GeoDataFrame using Longitude/Latitude...")
        x, y = LONLAT_COLUMNS
        crs = "EPSG:4326"
    else:
        raise KeyError(
            f"No coordinate columns found, need {OSGR_COLUMNS} or {LONLAT_COLUMNS}"
        )

    df_geo = df.dropna(subset=[x, y]).copy()
    geometry = [Point(xy) for xy in zip(df_geo[x], df_geo[y])]
    gdf = gpd.GeoDataFrame(df_geo, geometry=geometry, crs=crs)
    if crs != "EPSG:4326":
        gdf = gdf.to_crs("EPSG:4326")
    return gdf
