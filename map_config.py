import json
import os

config = {
    'initial_capacity': 10, # Capacity hint for a new OrderedMap when none is given
    'verbose': False, # Print status messages
}

def log(msg: str) -> None:
    if config['verbose']:
        print(msg)

# Load a json file and override the settings (above) with its values.
# Each value must have the same type as the default it replaces.
# Returns False if there is no such file.
def load(path: str) -> bool:
    if not os.path.exists(path):
        return False
    with open(path, mode='rb') as file:
        filecontents = file.read()
    overrides = json.loads(filecontents)
    if not isinstance(overrides, dict):
        raise ValueError(f'{path} does not contain a json object')
    for key in overrides.keys():
        if key not in config:
            raise KeyError(f'unrecognized setting: {key}')
        expected = type(config[key])
        val = overrides[key]
        # bool is a subclass of int, so compare types exactly
        if type(val) is not expected:
            raise ValueError(f'setting {key} should be {expected.__name__}, got {type(val).__name__}')
    if overrides.get('initial_capacity', 0) < 0:
        raise ValueError('initial_capacity must not be negative')
    config.update(overrides)
    log(f'Loaded settings from {path}')
    return True

load(os.environ.get('ORDERED_MAP_CONFIG', 'ordered_map.json'))
