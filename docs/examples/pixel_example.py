"""
# Pixel Coordinates Example

An example of using tilecrs to place locations on a tiled web map and to work with boxes that cross the antimeridian
"""


def main():
    """
    First, we pick a coordinate reference system.
    tilecrs ships the ones web maps commonly use; EPSG:3857 (spherical web mercator) is the default for tiled maps:
    """

    from tilecrs import EPSG3857, LatLng, Point

    kyiv = LatLng(50.45, 30.52)

    pixel = EPSG3857.lat_lng_to_point(kyiv, zoom=10)
    print(pixel)

    """
    The pixel is measured from the top left corner of the world at zoom 10, which is 256 * 2 ** 10 pixels wide.
    The tile that holds the location is the pixel divided by the tile size:
    """

    tile = pixel.unscale_by(Point(256, 256)).floor()
    print(tile)

    """
    Converting back gives the original location, up to floating point noise:
    """

    print(EPSG3857.point_to_lat_lng(pixel, zoom=10).to_string())

    """
    A pixel extent can be converted into a geographic box, for example to query data covering the visible map.
    Here we build the box seen by a 1024 x 768 viewport centered on kyiv:
    """

    from tilecrs import Bounds, LatLngBounds

    half_size = Point(512, 384)
    viewport = Bounds(pixel - half_size, pixel + half_size)

    visible = LatLngBounds(
        EPSG3857.point_to_lat_lng(viewport.get_bottom_left(), zoom=10),
        EPSG3857.point_to_lat_lng(viewport.get_top_right(), zoom=10),
    )
    print(visible.to_bbox_string())

    """
    Boxes around the pacific cross the antimeridian. tilecrs keeps the west edge greater than the east edge in that case,
    rather than turning the box into one that spans the globe:
    """

    fiji = LatLngBounds.from_latlngs([LatLng(-16.5, 177.4), LatLng(-18.1, -179.8)])
    print(fiji.crosses_antimeridian, fiji.lng_span)
    print(fiji.contains(LatLng(-17, 179.9)), fiji.contains(LatLng(-17, 0)))

    """
    Many locations at once are best handled as a geopandas frame. Frames in any CRS are reprojected to EPSG:4326 first:
    """

    import geopandas as gpd
    from shapely.geometry import Point as ShapelyPoint

    from tilecrs.utils.frame import frame_bounds, frame_to_pixels

    gdf = gpd.GeoDataFrame(
        {"name": ["suva", "nadi", "taveuni"]},
        geometry=[
            ShapelyPoint(178.44, -18.14),
            ShapelyPoint(177.44, -17.80),
            ShapelyPoint(-179.97, -16.86),
        ],
        crs="EPSG:4326",
    )

    print(frame_to_pixels(gdf, EPSG3857, zoom=8))
    print(frame_bounds(gdf))

    """
    Non-geographic images such as floor plans use the SIMPLE CRS, where one unit is one pixel at zoom 0 and the plane has no edge:
    """

    from tilecrs import SIMPLE

    print(SIMPLE.lat_lng_to_point(LatLng(100, 250), zoom=2))
    print(SIMPLE.distance(LatLng(0, 0), LatLng(30, 40)))


if __name__ == "__main__":
    main()
