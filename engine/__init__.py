"""Engine runtime primitives shared by game modules."""
