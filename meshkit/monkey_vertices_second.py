"""Vertices 254-506 of the reference "monkey" head mesh."""

from __future__ import annotations

from meshkit.vertex import VertexSimple

# (x, y, z, grey level); every vertex is opaque and grey (r == g == b).
_VERTICES = (
    (-0.781250, 0.179688, 0.296875, 0.500986),
    (-0.781250, -0.210938, 0.375000, 0.502959),
    (-0.781250, 0.210938, 0.375000, 0.504931),
    (-0.757812, -0.234375, 0.359375, 0.506903),
    (-0.757812, 0.234375, 0.359375, 0.508876),
    (-0.757812, -0.195312, 0.296875, 0.510848),
    (-0.757812, 0.195312, 0.296875, 0.512821),
    (-0.757812, -0.242188, 0.125000, 0.514793),
    (-0.757812, 0.242188, 0.125000, 0.516765),
    (-0.726562, -0.375000, 0.085938, 0.518738),
    (-0.726562, 0.375000, 0.085938, 0.520710),
    (-0.703125, -0.460938, 0.117188, 0.522682),
    (-0.703125, 0.460938, 0.117188, 0.524655),
    (-0.671875, -0.546875, 0.210938, 0.526627),
    (-0.671875, 0.546875, 0.210938, 0.528600),
    (-0.671875, -0.554688, 0.281250, 0.530572),
    (-0.671875, 0.554688, 0.281250, 0.532544),
    (-0.679688, -0.531250, 0.335938, 0.534517),
    (-0.679688, 0.531250, 0.335938, 0.536489),
    (-0.750000, -0.414062, 0.390625, 0.538462),
    (-0.750000, 0.414062, 0.390625, 0.540434),
    (-0.765625, -0.281250, 0.398438, 0.542406),
    (-0.765625, 0.281250, 0.398438, 0.544379),
    (-0.750000, -0.335938, 0.406250, 0.546351),
    (-0.750000, 0.335938, 0.406250, 0.548323),
    (-0.750000, -0.203125, 0.171875, 0.550296),
    (-0.750000, 0.203125, 0.171875, 0.552268),
    (-0.750000, -0.195312, 0.226562, 0.554241),
    (-0.750000, 0.195312, 0.226562, 0.556213),
    (-0.609375, -0.109375, 0.460938, 0.558185),
    (-0.609375, 0.109375, 0.460938, 0.560158),
    (-0.617188, -0.195312, 0.664062, 0.562130),
    (-0.617188, 0.195312, 0.664062, 0.564103),
    (-0.593750, -0.335938, 0.687500, 0.566075),
    (-0.593750, 0.335938, 0.687500, 0.568047),
    (-0.554688, -0.484375, 0.554688, 0.570020),
    (-0.554688, 0.484375, 0.554688, 0.571992),
    (-0.492188, -0.679688, 0.453125, 0.573964),
    (-0.492188, 0.679688, 0.453125, 0.575937),
    (-0.460938, -0.796875, 0.406250, 0.577909),
    (-0.460938, 0.796875, 0.406250, 0.579882),
    (-0.375000, -0.773438, 0.164062, 0.581854),
    (-0.375000, 0.773438, 0.164062, 0.583826),
    (-0.414062, -0.601562, 0.000000, 0.585799),
    (-0.414062, 0.601562, 0.000000, 0.587771),
    (-0.468750, -0.437500, -0.093750, 0.589744),
    (-0.468750, 0.437500, -0.093750, 0.591716),
    (-0.289062, 0.000000, 0.898438, 0.593688),
    (0.078125, 0.000000, 0.984375, 0.595661),
    (0.671875, 0.000000, -0.195312, 0.597633),
    (-0.187500, 0.000000, -0.460938, 0.599606),
    (-0.460938, 0.000000, -0.976562, 0.601578),
    (-0.343750, 0.000000, -0.804688, 0.603550),
    (-0.320312, 0.000000, -0.570312, 0.605523),
    (-0.281250, 0.000000, -0.484375, 0.607495),
    (-0.054688, -0.851562, 0.234375, 0.609467),
    (-0.054688, 0.851562, 0.234375, 0.611440),
    (0.046875, -0.859375, 0.320312, 0.613412),
    (0.046875, 0.859375, 0.320312, 0.615385),
    (0.437500, -0.773438, 0.265625, 0.617357),
    (0.437500, 0.773438, 0.265625, 0.619329),
    (0.703125, -0.460938, 0.437500, 0.621302),
    (0.703125, 0.460938, 0.437500, 0.623274),
    (-0.070312, -0.734375, -0.046875, 0.625247),
    (-0.070312, 0.734375, -0.046875, 0.627219),
    (0.164062, -0.593750, -0.125000, 0.629191),
    (0.164062, 0.593750, -0.125000, 0.631164),
    (0.429688, -0.640625, -0.007812, 0.633136),
    (0.429688, 0.640625, -0.007812, 0.635108),
    (0.664062, -0.335938, 0.054688, 0.637081),
    (0.664062, 0.335938, 0.054688, 0.639053),
    (-0.406250, -0.234375, -0.351562, 0.641026),
    (-0.406250, 0.234375, -0.351562, 0.642998),
    (-0.257812, -0.179688, -0.414062, 0.644970),
    (-0.257812, 0.179688, -0.414062, 0.646943),
    (-0.382812, -0.289062, -0.710938, 0.648915),
    (-0.382812, 0.289062, -0.710938, 0.650888),
    (-0.390625, -0.250000, -0.500000, 0.652860),
    (-0.390625, 0.250000, -0.500000, 0.654832),
    (-0.398438, -0.328125, -0.914062, 0.656805),
    (-0.398438, 0.328125, -0.914062, 0.658777),
    (-0.367188, -0.140625, -0.757812, 0.660750),
    (-0.367188, 0.140625, -0.757812, 0.662722),
    (-0.359375, -0.125000, -0.539062, 0.664694),
    (-0.359375, 0.125000, -0.539062, 0.666667),
    (-0.437500, -0.164062, -0.945312, 0.668639),
    (-0.437500, 0.164062, -0.945312, 0.670611),
    (-0.429688, -0.218750, -0.281250, 0.672584),
    (-0.429688, 0.218750, -0.281250, 0.674556),
    (-0.468750, -0.210938, -0.226562, 0.676529),
    (-0.468750, 0.210938, -0.226562, 0.678501),
    (-0.500000, -0.203125, -0.171875, 0.680473),
    (-0.500000, 0.203125, -0.171875, 0.682446),
    (-0.164062, -0.210938, -0.390625, 0.684418),
    (-0.164062, 0.210938, -0.390625, 0.686391),
    (0.265625, -0.296875, -0.312500, 0.688363),
    (0.265625, 0.296875, -0.312500, 0.690335),
    (0.539062, -0.343750, -0.148438, 0.692308),
    (0.539062, 0.343750, -0.148438, 0.694280),
    (0.382812, -0.453125, 0.867188, 0.696252),
    (0.382812, 0.453125, 0.867188, 0.698225),
    (0.070312, -0.453125, 0.929688, 0.700197),
    (0.070312, 0.453125, 0.929688, 0.702170),
    (-0.234375, -0.453125, 0.851562, 0.704142),
    (-0.234375, 0.453125, 0.851562, 0.706114),
    (-0.429688, -0.460938, 0.523438, 0.708087),
    (-0.429688, 0.460938, 0.523438, 0.710059),
    (-0.335938, -0.726562, 0.406250, 0.712032),
    (-0.335938, 0.726562, 0.406250, 0.714004),
    (-0.281250, -0.632812, 0.453125, 0.715976),
    (-0.281250, 0.632812, 0.453125, 0.717949),
    (-0.054688, -0.640625, 0.703125, 0.719921),
    (-0.054688, 0.640625, 0.703125, 0.721893),
    (-0.125000, -0.796875, 0.562500, 0.723866),
    (-0.125000, 0.796875, 0.562500, 0.725838),
    (0.117188, -0.796875, 0.617188, 0.727811),
    (0.117188, 0.796875, 0.617188, 0.729783),
    (0.195312, -0.640625, 0.750000, 0.731755),
    (0.195312, 0.640625, 0.750000, 0.733728),
    (0.445312, -0.640625, 0.679688, 0.735700),
    (0.445312, 0.640625, 0.679688, 0.737673),
    (0.359375, -0.796875, 0.539062, 0.739645),
    (0.359375, 0.796875, 0.539062, 0.741617),
    (0.585938, -0.617188, 0.328125, 0.743590),
    (0.585938, 0.617188, 0.328125, 0.745562),
    (0.546875, -0.484375, 0.023438, 0.747535),
    (0.546875, 0.484375, 0.023438, 0.749507),
    (0.203125, -0.820312, 0.328125, 0.751479),
    (0.203125, 0.820312, 0.328125, 0.753452),
    (-0.148438, -0.406250, -0.171875, 0.755424),
    (-0.148438, 0.406250, -0.171875, 0.757396),
    (0.210938, -0.429688, -0.195312, 0.759369),
    (0.210938, 0.429688, -0.195312, 0.761341),
    (0.234375, -0.890625, 0.406250, 0.763314),
    (0.234375, 0.890625, 0.406250, 0.765286),
    (0.125000, -0.773438, -0.140625, 0.767258),
    (0.125000, 0.773438, -0.140625, 0.769231),
    (0.328125, -1.039062, -0.101562, 0.771203),
    (0.328125, 1.039062, -0.101562, 0.773176),
    (0.429688, -1.281250, 0.054688, 0.775148),
    (0.429688, 1.281250, 0.054688, 0.777120),
    (0.421875, -1.351562, 0.320312, 0.779093),
    (0.421875, 1.351562, 0.320312, 0.781065),
    (0.421875, -1.234375, 0.507812, 0.783037),
    (0.421875, 1.234375, 0.507812, 0.785010),
    (0.312500, -1.023438, 0.476562, 0.786982),
    (0.312500, 1.023438, 0.476562, 0.788955),
    (0.289062, -1.015625, 0.414062, 0.790927),
    (0.289062, 1.015625, 0.414062, 0.792899),
    (0.390625, -1.187500, 0.437500, 0.794872),
    (0.390625, 1.187500, 0.437500, 0.796844),
    (0.406250, -1.265625, 0.289062, 0.798817),
    (0.406250, 1.265625, 0.289062, 0.800789),
    (0.406250, -1.210938, 0.078125, 0.802761),
    (0.406250, 1.210938, 0.078125, 0.804734),
    (0.304688, -1.031250, -0.039062, 0.806706),
    (0.304688, 1.031250, -0.039062, 0.808679),
    (0.132812, -0.828125, -0.070312, 0.810651),
    (0.132812, 0.828125, -0.070312, 0.812623),
    (0.218750, -0.921875, 0.359375, 0.814596),
    (0.218750, 0.921875, 0.359375, 0.816568),
    (0.289062, -0.945312, 0.304688, 0.818540),
    (0.289062, 0.945312, 0.304688, 0.820513),
    (0.210938, -0.882812, -0.023438, 0.822485),
    (0.210938, 0.882812, -0.023438, 0.824458),
    (0.367188, -1.039062, 0.000000, 0.826430),
    (0.367188, 1.039062, 0.000000, 0.828402),
    (0.445312, -1.187500, 0.093750, 0.830375),
    (0.445312, 1.187500, 0.093750, 0.832347),
    (0.445312, -1.234375, 0.250000, 0.834320),
    (0.445312, 1.234375, 0.250000, 0.836292),
    (0.437500, -1.171875, 0.359375, 0.838264),
    (0.437500, 1.171875, 0.359375, 0.840237),
    (0.359375, -1.023438, 0.343750, 0.842209),
    (0.359375, 1.023438, 0.343750, 0.844181),
    (0.210938, -0.843750, 0.289062, 0.846154),
    (0.210938, 0.843750, 0.289062, 0.848126),
    (0.273438, -0.835938, 0.171875, 0.850099),
    (0.273438, 0.835938, 0.171875, 0.852071),
    (0.273438, -0.757812, 0.093750, 0.854043),
    (0.273438, 0.757812, 0.093750, 0.856016),
    (0.273438, -0.820312, 0.085938, 0.857988),
    (0.273438, 0.820312, 0.085938, 0.859961),
    (0.273438, -0.843750, 0.015625, 0.861933),
    (0.273438, 0.843750, 0.015625, 0.863905),
    (0.273438, -0.812500, -0.015625, 0.865878),
    (0.273438, 0.812500, -0.015625, 0.867850),
    (0.070312, -0.726562, 0.000000, 0.869822),
    (0.070312, 0.726562, 0.000000, 0.871795),
    (0.171875, -0.718750, -0.023438, 0.873767),
    (0.171875, 0.718750, -0.023438, 0.875740),
    (0.187500, -0.718750, 0.039062, 0.877712),
    (0.187500, 0.718750, 0.039062, 0.879684),
    (0.210938, -0.796875, 0.203125, 0.881657),
    (0.210938, 0.796875, 0.203125, 0.883629),
    (0.265625, -0.890625, 0.242188, 0.885602),
    (0.265625, 0.890625, 0.242188, 0.887574),
    (0.320312, -0.890625, 0.234375, 0.889546),
    (0.320312, 0.890625, 0.234375, 0.891519),
    (0.320312, -0.812500, -0.015625, 0.893491),
    (0.320312, 0.812500, -0.015625, 0.895464),
    (0.320312, -0.851562, 0.015625, 0.897436),
    (0.320312, 0.851562, 0.015625, 0.899408),
    (0.320312, -0.828125, 0.078125, 0.901381),
    (0.320312, 0.828125, 0.078125, 0.903353),
    (0.320312, -0.765625, 0.093750, 0.905325),
    (0.320312, 0.765625, 0.093750, 0.907298),
    (0.320312, -0.843750, 0.171875, 0.909270),
    (0.320312, 0.843750, 0.171875, 0.911243),
    (0.414062, -1.039062, 0.328125, 0.913215),
    (0.414062, 1.039062, 0.328125, 0.915187),
    (0.484375, -1.187500, 0.343750, 0.917160),
    (0.484375, 1.187500, 0.343750, 0.919132),
    (0.492188, -1.257812, 0.242188, 0.921105),
    (0.492188, 1.257812, 0.242188, 0.923077),
    (0.484375, -1.210938, 0.085938, 0.925049),
    (0.484375, 1.210938, 0.085938, 0.927022),
    (0.421875, -1.046875, 0.000000, 0.928994),
    (0.421875, 1.046875, 0.000000, 0.930966),
    (0.265625, -0.882812, -0.015625, 0.932939),
    (0.265625, 0.882812, -0.015625, 0.934911),
    (0.343750, -0.953125, 0.289062, 0.936884),
    (0.343750, 0.953125, 0.289062, 0.938856),
    (0.328125, -0.890625, 0.109375, 0.940828),
    (0.328125, 0.890625, 0.109375, 0.942801),
    (0.335938, -0.937500, 0.062500, 0.944773),
    (0.335938, 0.937500, 0.062500, 0.946746),
    (0.367188, -1.000000, 0.125000, 0.948718),
    (0.367188, 1.000000, 0.125000, 0.950690),
    (0.351562, -0.960938, 0.171875, 0.952663),
    (0.351562, 0.960938, 0.171875, 0.954635),
    (0.375000, -1.015625, 0.234375, 0.956607),
    (0.375000, 1.015625, 0.234375, 0.958580),
    (0.382812, -1.054688, 0.187500, 0.960552),
    (0.382812, 1.054688, 0.187500, 0.962525),
    (0.390625, -1.109375, 0.210938, 0.964497),
    (0.390625, 1.109375, 0.210938, 0.966469),
    (0.390625, -1.085938, 0.273438, 0.968442),
    (0.390625, 1.085938, 0.273438, 0.970414),
    (0.484375, -1.023438, 0.437500, 0.972387),
    (0.484375, 1.023438, 0.437500, 0.974359),
    (0.546875, -1.250000, 0.468750, 0.976331),
    (0.546875, 1.250000, 0.468750, 0.978304),
    (0.500000, -1.367188, 0.296875, 0.980276),
    (0.500000, 1.367188, 0.296875, 0.982249),
    (0.531250, -1.312500, 0.054688, 0.984221),
    (0.531250, 1.312500, 0.054688, 0.986193),
    (0.492188, -1.039062, -0.085938, 0.988166),
    (0.492188, 1.039062, -0.085938, 0.990138),
    (0.328125, -0.789062, -0.125000, 0.992110),
    (0.328125, 0.789062, -0.125000, 0.994083),
    (0.382812, -0.859375, 0.382812, 0.996055),
    (0.382812, 0.859375, 0.382812, 0.998028),
)


def second_half_vertices() -> list[VertexSimple]:
    """Return a fresh list of the monkey mesh's last 253 vertices (254-506)."""
    return [
        VertexSimple(x, y, z, shade, shade, shade, 1.0)
        for x, y, z, shade in _VERTICES
    ]