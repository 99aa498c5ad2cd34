"""Vertices 0-253 of the reference "monkey" head mesh."""

from __future__ import annotations

from meshkit.vertex import VertexSimple

# (x, y, z, grey level); every vertex is opaque and grey (r == g == b).
_VERTICES = (
    (-0.765625, -0.437500, 0.164062, 0.000000),
    (-0.765625, 0.437500, 0.164062, 0.001972),
    (-0.687500, -0.500000, 0.093750, 0.003945),
    (-0.687500, 0.500000, 0.093750, 0.005917),
    (-0.578125, -0.546875, 0.054688, 0.007890),
    (-0.578125, 0.546875, 0.054688, 0.009862),
    (-0.617188, -0.351562, -0.023438, 0.011834),
    (-0.617188, 0.351562, -0.023438, 0.013807),
    (-0.718750, -0.351562, 0.031250, 0.015779),
    (-0.718750, 0.351562, 0.031250, 0.017751),
    (-0.781250, -0.351562, 0.132812, 0.019724),
    (-0.781250, 0.351562, 0.132812, 0.021696),
    (-0.796875, -0.273438, 0.164062, 0.023669),
    (-0.796875, 0.273438, 0.164062, 0.025641),
    (-0.742188, -0.203125, 0.093750, 0.027613),
    (-0.742188, 0.203125, 0.093750, 0.029586),
    (-0.648438, -0.156250, 0.054688, 0.031558),
    (-0.648438, 0.156250, 0.054688, 0.033531),
    (-0.656250, -0.078125, 0.242188, 0.035503),
    (-0.656250, 0.078125, 0.242188, 0.037475),
    (-0.742188, -0.140625, 0.242188, 0.039448),
    (-0.742188, 0.140625, 0.242188, 0.041420),
    (-0.796875, -0.242188, 0.242188, 0.043393),
    (-0.796875, 0.242188, 0.242188, 0.045365),
    (-0.796875, -0.273438, 0.328125, 0.047337),
    (-0.796875, 0.273438, 0.328125, 0.049310),
    (-0.742188, -0.203125, 0.390625, 0.051282),
    (-0.742188, 0.203125, 0.390625, 0.053254),
    (-0.648438, -0.156250, 0.437500, 0.055227),
    (-0.648438, 0.156250, 0.437500, 0.057199),
    (-0.617188, -0.351562, 0.515625, 0.059172),
    (-0.617188, 0.351562, 0.515625, 0.061144),
    (-0.718750, -0.351562, 0.453125, 0.063116),
    (-0.718750, 0.351562, 0.453125, 0.065089),
    (-0.781250, -0.351562, 0.359375, 0.067061),
    (-0.781250, 0.351562, 0.359375, 0.069034),
    (-0.765625, -0.437500, 0.328125, 0.071006),
    (-0.765625, 0.437500, 0.328125, 0.072978),
    (-0.687500, -0.500000, 0.390625, 0.074951),
    (-0.687500, 0.500000, 0.390625, 0.076923),
    (-0.578125, -0.546875, 0.437500, 0.078895),
    (-0.578125, 0.546875, 0.437500, 0.080868),
    (-0.562500, -0.625000, 0.242188, 0.082840),
    (-0.562500, 0.625000, 0.242188, 0.084813),
    (-0.671875, -0.562500, 0.242188, 0.086785),
    (-0.671875, 0.562500, 0.242188, 0.088757),
    (-0.757812, -0.468750, 0.242188, 0.090730),
    (-0.757812, 0.468750, 0.242188, 0.092702),
    (-0.773438, -0.476562, 0.242188, 0.094675),
    (-0.773438, 0.476562, 0.242188, 0.096647),
    (-0.781250, -0.445312, 0.335938, 0.098619),
    (-0.781250, 0.445312, 0.335938, 0.100592),
    (-0.804688, -0.351562, 0.375000, 0.102564),
    (-0.804688, 0.351562, 0.375000, 0.104536),
    (-0.820312, -0.265625, 0.335938, 0.106509),
    (-0.820312, 0.265625, 0.335938, 0.108481),
    (-0.820312, -0.226562, 0.242188, 0.110454),
    (-0.820312, 0.226562, 0.242188, 0.112426),
    (-0.820312, -0.265625, 0.156250, 0.114398),
    (-0.820312, 0.265625, 0.156250, 0.116371),
    (-0.828125, -0.351562, 0.242188, 0.118343),
    (-0.828125, 0.351562, 0.242188, 0.120316),
    (-0.804688, -0.351562, 0.117188, 0.122288),
    (-0.804688, 0.351562, 0.117188, 0.124260),
    (-0.781250, -0.445312, 0.156250, 0.126233),
    (-0.781250, 0.445312, 0.156250, 0.128205),
    (-0.742188, 0.000000, 0.429688, 0.130178),
    (-0.820312, 0.000000, 0.351562, 0.132150),
    (-0.734375, 0.000000, -0.679688, 0.134122),
    (-0.781250, 0.000000, -0.320312, 0.136095),
    (-0.796875, 0.000000, -0.187500, 0.138067),
    (-0.718750, 0.000000, -0.773438, 0.140039),
    (-0.601562, 0.000000, 0.406250, 0.142012),
    (-0.570312, 0.000000, 0.570312, 0.143984),
    (0.546875, 0.000000, 0.898438, 0.145957),
    (0.851562, 0.000000, 0.562500, 0.147929),
    (0.828125, 0.000000, 0.070312, 0.149901),
    (0.351562, 0.000000, -0.382812, 0.151874),
    (-0.562500, -0.203125, -0.187500, 0.153846),
    (-0.562500, 0.203125, -0.187500, 0.155819),
    (-0.570312, -0.312500, -0.437500, 0.157791),
    (-0.570312, 0.312500, -0.437500, 0.159763),
    (-0.570312, -0.351562, -0.695312, 0.161736),
    (-0.570312, 0.351562, -0.695312, 0.163708),
    (-0.531250, -0.367188, -0.890625, 0.165680),
    (-0.531250, 0.367188, -0.890625, 0.167653),
    (-0.523438, -0.328125, -0.945312, 0.169625),
    (-0.523438, 0.328125, -0.945312, 0.171598),
    (-0.554688, -0.179688, -0.968750, 0.173570),
    (-0.554688, 0.179688, -0.968750, 0.175542),
    (-0.578125, 0.000000, -0.984375, 0.177515),
    (-0.531250, -0.437500, -0.140625, 0.179487),
    (-0.531250, 0.437500, -0.140625, 0.181460),
    (-0.539062, -0.632812, -0.039062, 0.183432),
    (-0.539062, 0.632812, -0.039062, 0.185404),
    (-0.445312, -0.828125, 0.148438, 0.187377),
    (-0.445312, 0.828125, 0.148438, 0.189349),
    (-0.593750, -0.859375, 0.429688, 0.191321),
    (-0.593750, 0.859375, 0.429688, 0.193294),
    (-0.625000, -0.710938, 0.484375, 0.195266),
    (-0.625000, 0.710938, 0.484375, 0.197239),
    (-0.687500, -0.492188, 0.601562, 0.199211),
    (-0.687500, 0.492188, 0.601562, 0.201183),
    (-0.734375, -0.320312, 0.757812, 0.203156),
    (-0.734375, 0.320312, 0.757812, 0.205128),
    (-0.757812, -0.156250, 0.718750, 0.207101),
    (-0.757812, 0.156250, 0.718750, 0.209073),
    (-0.750000, -0.062500, 0.492188, 0.211045),
    (-0.750000, 0.062500, 0.492188, 0.213018),
    (-0.773438, -0.164062, 0.414062, 0.214990),
    (-0.773438, 0.164062, 0.414062, 0.216963),
    (-0.765625, -0.125000, 0.304688, 0.218935),
    (-0.765625, 0.125000, 0.304688, 0.220907),
    (-0.742188, -0.203125, 0.093750, 0.027613),
    (-0.742188, 0.203125, 0.093750, 0.029586),
    (-0.703125, -0.375000, 0.015625, 0.226824),
    (-0.703125, 0.375000, 0.015625, 0.228797),
    (-0.671875, -0.492188, 0.062500, 0.230769),
    (-0.671875, 0.492188, 0.062500, 0.232742),
    (-0.648438, -0.625000, 0.187500, 0.234714),
    (-0.648438, 0.625000, 0.187500, 0.236686),
    (-0.648438, -0.640625, 0.296875, 0.238659),
    (-0.648438, 0.640625, 0.296875, 0.240631),
    (-0.664062, -0.601562, 0.375000, 0.242604),
    (-0.664062, 0.601562, 0.375000, 0.244576),
    (-0.718750, -0.429688, 0.437500, 0.246548),
    (-0.718750, 0.429688, 0.437500, 0.248521),
    (-0.757812, -0.250000, 0.468750, 0.250493),
    (-0.757812, 0.250000, 0.468750, 0.252465),
    (-0.734375, 0.000000, -0.765625, 0.254438),
    (-0.734375, -0.109375, -0.718750, 0.256410),
    (-0.734375, 0.109375, -0.718750, 0.258383),
    (-0.710938, -0.117188, -0.835938, 0.260355),
    (-0.710938, 0.117188, -0.835938, 0.262327),
    (-0.695312, -0.062500, -0.882812, 0.264300),
    (-0.695312, 0.062500, -0.882812, 0.266272),
    (-0.687500, 0.000000, -0.890625, 0.268245),
    (-0.750000, 0.000000, -0.195312, 0.270217),
    (-0.742188, 0.000000, -0.140625, 0.272189),
    (-0.742188, -0.101562, -0.148438, 0.274162),
    (-0.742188, 0.101562, -0.148438, 0.276134),
    (-0.750000, -0.125000, -0.226562, 0.278107),
    (-0.750000, 0.125000, -0.226562, 0.280079),
    (-0.742188, -0.085938, -0.289062, 0.282051),
    (-0.742188, 0.085938, -0.289062, 0.284024),
    (-0.671875, -0.398438, -0.046875, 0.285996),
    (-0.671875, 0.398438, -0.046875, 0.287968),
    (-0.625000, -0.617188, 0.054688, 0.289941),
    (-0.625000, 0.617188, 0.054688, 0.291913),
    (-0.601562, -0.726562, 0.203125, 0.293886),
    (-0.601562, 0.726562, 0.203125, 0.295858),
    (-0.656250, -0.742188, 0.375000, 0.297830),
    (-0.656250, 0.742188, 0.375000, 0.299803),
    (-0.726562, -0.687500, 0.414062, 0.301775),
    (-0.726562, 0.687500, 0.414062, 0.303748),
    (-0.796875, -0.437500, 0.546875, 0.305720),
    (-0.796875, 0.437500, 0.546875, 0.307692),
    (-0.835938, -0.312500, 0.640625, 0.309665),
    (-0.835938, 0.312500, 0.640625, 0.311637),
    (-0.851562, -0.203125, 0.617188, 0.313609),
    (-0.851562, 0.203125, 0.617188, 0.315582),
    (-0.843750, -0.101562, 0.429688, 0.317554),
    (-0.843750, 0.101562, 0.429688, 0.319527),
    (-0.812500, -0.125000, -0.101562, 0.321499),
    (-0.812500, 0.125000, -0.101562, 0.323471),
    (-0.710938, -0.210938, -0.445312, 0.325444),
    (-0.710938, 0.210938, -0.445312, 0.327416),
    (-0.687500, -0.250000, -0.703125, 0.329389),
    (-0.687500, 0.250000, -0.703125, 0.331361),
    (-0.664062, -0.265625, -0.820312, 0.333333),
    (-0.664062, 0.265625, -0.820312, 0.335306),
    (-0.632812, -0.234375, -0.914062, 0.337278),
    (-0.632812, 0.234375, -0.914062, 0.339250),
    (-0.632812, -0.164062, -0.929688, 0.341223),
    (-0.632812, 0.164062, -0.929688, 0.343195),
    (-0.640625, 0.000000, -0.945312, 0.345168),
    (-0.726562, 0.000000, 0.046875, 0.347140),
    (-0.765625, 0.000000, 0.210938, 0.349112),
    (-0.742188, -0.328125, 0.476562, 0.351085),
    (-0.742188, 0.328125, 0.476562, 0.353057),
    (-0.750000, -0.164062, 0.140625, 0.355030),
    (-0.750000, 0.164062, 0.140625, 0.357002),
    (-0.757812, -0.132812, 0.210938, 0.358974),
    (-0.757812, 0.132812, 0.210938, 0.360947),
    (-0.734375, -0.117188, -0.687500, 0.362919),
    (-0.734375, 0.117188, -0.687500, 0.364892),
    (-0.750000, -0.078125, -0.445312, 0.366864),
    (-0.750000, 0.078125, -0.445312, 0.368836),
    (-0.750000, 0.000000, -0.445312, 0.370809),
    (-0.742188, 0.000000, -0.328125, 0.372781),
    (-0.781250, -0.093750, -0.273438, 0.374753),
    (-0.781250, 0.093750, -0.273438, 0.376726),
    (-0.796875, -0.132812, -0.226562, 0.378698),
    (-0.796875, 0.132812, -0.226562, 0.380671),
    (-0.781250, -0.109375, -0.132812, 0.382643),
    (-0.781250, 0.109375, -0.132812, 0.384615),
    (-0.781250, -0.039062, -0.125000, 0.386588),
    (-0.781250, 0.039062, -0.125000, 0.388560),
    (-0.828125, 0.000000, -0.203125, 0.390533),
    (-0.812500, -0.046875, -0.148438, 0.392505),
    (-0.812500, 0.046875, -0.148438, 0.394477),
    (-0.812500, -0.093750, -0.156250, 0.396450),
    (-0.812500, 0.093750, -0.156250, 0.398422),
    (-0.828125, -0.109375, -0.226562, 0.400394),
    (-0.828125, 0.109375, -0.226562, 0.402367),
    (-0.804688, -0.078125, -0.250000, 0.404339),
    (-0.804688, 0.078125, -0.250000, 0.406312),
    (-0.804688, 0.000000, -0.289062, 0.408284),
    (-0.554688, -0.257812, -0.312500, 0.410256),
    (-0.554688, 0.257812, -0.312500, 0.412229),
    (-0.710938, -0.164062, -0.242188, 0.414201),
    (-0.710938, 0.164062, -0.242188, 0.416174),
    (-0.710938, -0.179688, -0.312500, 0.418146),
    (-0.710938, 0.179688, -0.312500, 0.420118),
    (-0.554688, -0.234375, -0.250000, 0.422091),
    (-0.554688, 0.234375, -0.250000, 0.424063),
    (-0.687500, 0.000000, -0.875000, 0.426036),
    (-0.687500, -0.046875, -0.867188, 0.428008),
    (-0.687500, 0.046875, -0.867188, 0.429980),
    (-0.710938, -0.093750, -0.820312, 0.431953),
    (-0.710938, 0.093750, -0.820312, 0.433925),
    (-0.726562, -0.093750, -0.742188, 0.435897),
    (-0.726562, 0.093750, -0.742188, 0.437870),
    (-0.656250, 0.000000, -0.781250, 0.439842),
    (-0.664062, -0.093750, -0.750000, 0.441815),
    (-0.664062, 0.093750, -0.750000, 0.443787),
    (-0.640625, -0.093750, -0.812500, 0.445759),
    (-0.640625, 0.093750, -0.812500, 0.447732),
    (-0.632812, -0.046875, -0.851562, 0.449704),
    (-0.632812, 0.046875, -0.851562, 0.451677),
    (-0.632812, 0.000000, -0.859375, 0.453649),
    (-0.781250, -0.171875, 0.218750, 0.455621),
    (-0.781250, 0.171875, 0.218750, 0.457594),
    (-0.773438, -0.187500, 0.156250, 0.459566),
    (-0.773438, 0.187500, 0.156250, 0.461538),
    (-0.757812, -0.335938, 0.429688, 0.463511),
    (-0.757812, 0.335938, 0.429688, 0.465483),
    (-0.773438, -0.273438, 0.421875, 0.467456),
    (-0.773438, 0.273438, 0.421875, 0.469428),
    (-0.773438, -0.421875, 0.398438, 0.471400),
    (-0.773438, 0.421875, 0.398438, 0.473373),
    (-0.695312, -0.562500, 0.351562, 0.475345),
    (-0.695312, 0.562500, 0.351562, 0.477318),
    (-0.687500, -0.585938, 0.289062, 0.479290),
    (-0.687500, 0.585938, 0.289062, 0.481262),
    (-0.679688, -0.578125, 0.195312, 0.483235),
    (-0.679688, 0.578125, 0.195312, 0.485207),
    (-0.718750, -0.476562, 0.101562, 0.487179),
    (-0.718750, 0.476562, 0.101562, 0.489152),
    (-0.742188, -0.375000, 0.062500, 0.491124),
    (-0.742188, 0.375000, 0.062500, 0.493097),
    (-0.781250, -0.226562, 0.109375, 0.495069),
    (-0.781250, 0.226562, 0.109375, 0.497041),
    (-0.781250, -0.179688, 0.296875, 0.499014),
)


def first_half_vertices() -> list[VertexSimple]:
    """Return a fresh list of the monkey mesh's first 254 vertices (0-253)."""
    return [
        VertexSimple(x, y, z, shade, shade, shade, 1.0)
        for x, y, z, shade in _VERTICES
    ]