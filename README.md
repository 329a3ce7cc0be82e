# amber_engine

The engine-independent core of a small game engine. It is pure Python and
uses only the standard library.

## What it provides

- `amber_engine.formula`: fade curves (`fade_function_3`, `fade_function_5`),
  `linear_interpolation`, `inverse_linear_interpolation`,
  `cubic_interpolation`, `quintic_interpolation` and `sigmoid` (rescaled to
  the range -1 to 1). It also has the component indices `X`, `Y`, `Z`, `W` and
  the constants `PI`, `PI_2` and `PI_4`.
- `amber_engine.vector`: a mutable `Vector` of any size. It supports
  arithmetic with scalars and with other vectors, component by component, and
  has `norm`, `norm2` and an in-place `normalize`. The module functions are
  `normalize`, `component_sum`, `dot`, `cross` (a scalar for 2-vectors and a
  vector for 3-vectors), `angle`, `distance`, `reflect`, `refract` and
  `face_same_direction`. The coordinate conversions `polar`, `cylindrical` and
  `spherical` return tuples. `merge`, `append`, `insert`, `remove` and
  `sub_vector` build new vectors. `cast`, `vmin`, `vmax`, `vabs` and `sign`
  work on components.
- `amber_engine.matrix`: a column-major `Matrix`. `m[i, j]` is an element and
  `m[j]` is a column as a `Vector`. `Matrix.from_columns`, `column` and
  `copy_from` build or fill a matrix. `+=`, `-=`, `*=` and `/=` work in place,
  element by element. `*=` is not a matrix product.
- `amber_engine.quaternion`: `Quaternion` (index 0 is the real part) with the
  Hamilton product, `imag`, `norm`, `conjugate` and `inverse`. It converts to
  and from rotation matrices (`quat_to_rotation3`, `quat_to_rotation4`,
  `quat_from_rotation3`), Euler angles (`euler_angle_to_quat`,
  `quat_to_euler_angle`, which returns `(roll, pitch, yaw)`) and axis/angle
  (`quat_from_angle_vec_of_rotation`, `quat_to_angle_of_rotation`,
  `quat_to_vec_of_rotation`). `quat_rotate_vec` rotates a vector.
- `amber_engine.hierarchy`: typed values held as little-endian bytes
  (`DataType`, `Data`) in nested `Group`s under a named `Hierarchy`.
  `add_data` stores a value. It infers the type when none is given and
  overwrites with a logged warning. `get_data` reads a value back and checks
  its type when one is given. Failures raise `HierarchyError`.
- `amber_engine.configuration`: `Configuration` holds logger, window, timer
  and audio settings, with a shared `Configuration.instance()`. After
  `initialize()`, changing a setting raises `ConfigurationLockedError`.
  `config_to_hierarchy()` exports the settings as a `Hierarchy`.
- `amber_engine.asset_storage`: `AssetStorage` builds assets of one type and
  hands out `AssetHandle`s. It reuses freed slots, most recently freed first.
  `get` raises `KeyError` for a handle that is no longer valid.
- `amber_engine.keycode`, `amber_engine.keyboard`, `amber_engine.mouse` and
  `amber_engine.events` track input state frame by frame: `KeyCode`,
  `Keyboard` (with a `buffer` of typed characters), `MouseButton`, `Mouse`
  (its `y` grows upward), and an `EventManager` fed with `InputEvent`s of an
  `EventKind`.

## What it does not do

There is no window, rendering, audio playback, camera, font or texture
loading here. There is also no reading of the operating system's input queue.
The caller passes each frame's events and cursor position to
`EventManager.manage`. A `Hierarchy` lives in memory only, so the package has
no way to save configuration to a file or load it back.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example

    from amber_engine.vector import Vector, dot, cross
    from amber_engine.quaternion import euler_angle_to_quat, quat_rotate_vec

    a = Vector(1.0, 0.0, 0.0)
    b = Vector(0.0, 1.0, 0.0)
    print(dot(a, b))        # 0.0
    print(cross(a, b))      # Vec[3](0, 0, 1)

    q = euler_angle_to_quat(0.0, 0.0, 1.5707963267948966)
    print(quat_rotate_vec(q, a))   # close to (0, 1, 0)

Input handling for each frame:

    from amber_engine.events import EventManager, InputEvent, EventKind
    from amber_engine.keycode import KeyCode

    manager = EventManager(window_height=1080)
    manager.manage([InputEvent(EventKind.KEY_DOWN, KeyCode.A)], 10, 20)
    assert manager.keyboard.key_down(KeyCode.A)
    assert manager.keyboard.buffer == ["a"]
    assert manager.mouse.position == (10, 1060)