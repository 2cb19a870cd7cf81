import unittest

from decimal_clock.layout import CanvasGeometry, ResponsiveLayout, compute_layout


class RecordingSurface:
    def __init__(self):
        self.geometries = []

    def set_canvas_geometry(self, geometry):
        self.geometries.append(geometry)


class TestComputeLayout(unittest.TestCase):
    def test_wide_container(self):
        layout = compute_layout(1000)
        self.assertEqual(layout.linear, CanvasGeometry(900, 300))
        self.assertEqual(layout.radial, CanvasGeometry(600, 600))

    def test_narrow_container(self):
        layout = compute_layout(500)
        self.assertEqual(layout.linear, CanvasGeometry(450, 300))
        self.assertEqual(layout.radial, CanvasGeometry(450, 450))

    def test_very_wide_container_keeps_aspect(self):
        layout = compute_layout(1600)
        self.assertEqual(layout.linear, CanvasGeometry(1440, 420))
        self.assertEqual(layout.radial, CanvasGeometry(600, 600))

    def test_fixed_layout(self):
        layout = compute_layout(500, responsive=False)
        self.assertEqual(layout.linear, CanvasGeometry(1200, 350))
        self.assertEqual(layout.radial, CanvasGeometry(600, 600))

    def test_zero_width_gives_empty_surfaces(self):
        layout = compute_layout(0)
        self.assertTrue(layout.linear.is_empty)
        self.assertTrue(layout.radial.is_empty)
        self.assertFalse(compute_layout(500).linear.is_empty)


class TestResponsiveLayout(unittest.TestCase):
    def test_apply_pushes_geometry_to_surfaces(self):
        bars, rings = RecordingSurface(), RecordingSurface()
        manager = ResponsiveLayout(bars, rings)

        self.assertTrue(manager.apply(1000))
        self.assertTrue(manager.apply(500))

        self.assertEqual(bars.geometries, [CanvasGeometry(900, 300), CanvasGeometry(450, 300)])
        self.assertEqual(rings.geometries, [CanvasGeometry(600, 600), CanvasGeometry(450, 450)])

    def test_apply_is_idempotent(self):
        bars, rings = RecordingSurface(), RecordingSurface()
        manager = ResponsiveLayout(bars, rings)
        manager.apply(800)
        self.assertFalse(manager.apply(800))
        self.assertEqual(len(bars.geometries), 1)
        self.assertEqual(manager.current, compute_layout(800))

    def test_non_responsive_only_applies_once(self):
        bars = RecordingSurface()
        manager = ResponsiveLayout(bars, None, responsive=False)
        self.assertTrue(manager.apply(300))
        self.assertFalse(manager.apply(2000))
        self.assertEqual(bars.geometries, [CanvasGeometry(1200, 350)])


if __name__ == "__main__":
    unittest.main()
