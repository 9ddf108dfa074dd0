#!/usr/bin/env python3
"""
Configuration file for the Cluster Plotter

This file contains all user-specific paths and settings that need to be
configured for different users or environments.

The configuration is read from config.ini (or config_local.ini if it exists).
"""

import os
import subprocess
import configparser

DEFAULT_FRAME_OFFSET_X = 8.2  # Sun -> galactic centre distance (kpc)


def get_git_repo_root():
    """Get the root directory of the current git repository"""
    try:
        # Try to get the git repository root
        result = subprocess.run(
            ['git', 'rev-parse', '--show-toplevel'],
            capture_output=True,
            text=True,
            cwd=os.path.dirname(os.path.abspath(__file__))
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.SubprocessError, FileNotFoundError):
        pass

    # Fallback: the project root is two levels above src/
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Config:
    """Configuration class for cluster plotter paths and settings"""

    def __init__(self, config_file=None):
        # Auto-detect project root from git repository
        self._detected_project_root = get_git_repo_root()

        # Load configuration from INI file
        self._load_config(config_file)

        # Set up paths and rendering settings
        self._setup_paths()
        self._setup_settings()

    def _load_config(self, config_file=None):
        """Load configuration from INI file"""
        self.config_parser = configparser.ConfigParser(
            interpolation=configparser.ExtendedInterpolation()
        )
        # Keep option names case-sensitive (column names live here)
        self.config_parser.optionxform = str

        if config_file is None:
            # Try config_local.ini first (gitignored), then config.ini
            config_files = [
                os.path.join(self._detected_project_root, 'config_local.ini'),
                os.path.join(self._detected_project_root, 'config.ini')
            ]

            for config_file in config_files:
                if os.path.exists(config_file):
                    print(f"📋 Loading configuration from: {config_file}")
                    self.config_parser.read(config_file)
                    self._config_file_used = config_file
                    break
            else:
                raise FileNotFoundError(
                    f"No configuration file found. Expected one of: {config_files}\n"
                    f"Please create config_local.ini or ensure config.ini exists."
                )
        else:
            if not os.path.exists(config_file):
                raise FileNotFoundError(f"Configuration file not found: {config_file}")
            print(f"📋 Loading configuration from: {config_file}")
            self.config_parser.read(config_file)
            self._config_file_used = config_file

    def _expand_path(self, path_str):
        """Expand environment variables and resolve paths"""
        if path_str:
            expanded = os.path.expandvars(os.path.expanduser(path_str))
            if not os.path.isabs(expanded):
                expanded = os.path.join(self._detected_project_root, expanded)
            return expanded
        return path_str

    def _get_float(self, section, option, fallback):
        return self.config_parser.getfloat(section, option, fallback=fallback)

    def _setup_paths(self):
        """Set up all paths from configuration"""

        self.data_file = self._expand_path(self.config_parser.get('paths', 'data_file'))

        if self.config_parser.has_option('paths', 'export_dir'):
            self.export_dir = self._expand_path(self.config_parser.get('paths', 'export_dir'))
        else:
            self.export_dir = os.path.join(self._detected_project_root, 'exports')

        # Project paths - use auto-detected git repository root
        self.project_root = self._detected_project_root

    def _setup_settings(self):
        """Set up ingestion, rendering, animation and server settings"""

        # Ingestion
        self.frame_offset_x = self._get_float('ingestion', 'frame_offset_x', DEFAULT_FRAME_OFFSET_X)
        self.pericenter_column = self.config_parser.get('ingestion', 'pericenter_column', fallback='RPERI')
        self.apocenter_column = self.config_parser.get('ingestion', 'apocenter_column', fallback='RAPO')
        momentum_columns = self.config_parser.get('ingestion', 'angular_momentum_columns', fallback='LX, LY, LZ')
        self.angular_momentum_columns = tuple(
            column.strip() for column in momentum_columns.split(',') if column.strip()
        )
        if len(self.angular_momentum_columns) != 3:
            raise ValueError(
                f"angular_momentum_columns must name exactly 3 columns, got: {momentum_columns}"
            )

        # Rendering
        self.min_radius = self._get_float('rendering', 'min_radius', 0.05)
        self.max_radius = self._get_float('rendering', 'max_radius', 0.5)
        self.min_metallicity = self._get_float('rendering', 'min_metallicity', -2.5)
        self.max_metallicity = self._get_float('rendering', 'max_metallicity', 0.5)
        self.reference_radius = self._get_float('rendering', 'reference_radius', 0.2)

        # Animation
        self.interval_ms = self.config_parser.getint('animation', 'interval_ms', fallback=16)
        self.rotation_step = self._get_float('animation', 'rotation_step', 0.5)

        # Server
        self.host = self.config_parser.get('server', 'host', fallback='localhost')
        self.port = self.config_parser.getint('server', 'port', fallback=8050)

    @property
    def metallicity_domain(self):
        return self.min_metallicity, self.max_metallicity

    def get_export_path(self, filename):
        """Get path for an exported file, creating the export directory if needed"""
        os.makedirs(self.export_dir, exist_ok=True)
        return os.path.join(self.export_dir, filename)

    def validate_paths(self):
        """Validate that critical paths exist and return status"""
        issues = []

        if not os.path.exists(self.data_file):
            issues.append(f"❌ Data file: {self.data_file} does not exist")
        else:
            print(f"✅ Data file: {self.data_file}")

        # Export directory is created on demand
        if not os.path.exists(self.export_dir):
            print(f"⚠️  Export directory: {self.export_dir} does not exist (created on first export)")
        else:
            print(f"✅ Export directory: {self.export_dir}")

        if self.min_radius > self.max_radius:
            issues.append(f"❌ min_radius ({self.min_radius}) is larger than max_radius ({self.max_radius})")
        if self.min_metallicity >= self.max_metallicity:
            issues.append(
                f"❌ min_metallicity ({self.min_metallicity}) must be below max_metallicity ({self.max_metallicity})"
            )

        return len(issues) == 0, issues

    def print_config_summary(self):
        """Print a summary of current configuration"""
        print("=== Cluster Plotter Configuration ===")
        print(f"Configuration file: {self._config_file_used}")
        print(f"Project root (auto-detected): {self.project_root}")
        print(f"Data file: {self.data_file}")
        print(f"Export directory: {self.export_dir}")
        print("")
        print("Ingestion:")
        print(f"  X frame offset: {self.frame_offset_x}")
        print(f"  Orbit columns: {self.pericenter_column}, {self.apocenter_column}")
        print("")
        print("Rendering:")
        print(f"  Radius range: {self.min_radius} to {self.max_radius}")
        print(f"  Metallicity domain: {self.min_metallicity} to {self.max_metallicity}")
        print("")
        print(f"Animation: {self.interval_ms} ms ticks, rotation step {self.rotation_step}°")
        print(f"Server: {self.host}:{self.port}")
        print("=====================================")


# Global configuration instance (lazy initialization)
_config = None


def get_config(config_file=None):
    """Get the global configuration instance or create a new one with custom config file"""
    global _config

    if config_file:
        # Return a new instance with custom config file (don't update global)
        return Config(config_file)

    # Return or create the global instance
    if _config is None:
        _config = Config()
    return _config


class _ConfigProxy:
    """Proxy object for lazy config initialization"""
    def __getattr__(self, name):
        return getattr(get_config(), name)

    def __dir__(self):
        return dir(get_config())


config = _ConfigProxy()


def validate_environment():
    """Validate the current environment and return status"""
    return get_config().validate_paths()


class ConfigFromEnv(Config):
    """Configuration class that reads the data file from the environment with INI fallback"""

    def __init__(self, config_file=None):
        super().__init__(config_file)

        env_data_file = os.environ.get('CLUSTER_PLOTTER_DATA')
        if env_data_file:
            self.data_file = os.path.expandvars(os.path.expanduser(env_data_file))
            print(f"🌍 Using CLUSTER_PLOTTER_DATA from environment: {self.data_file}")

        env_export_dir = os.environ.get('CLUSTER_PLOTTER_EXPORT_DIR')
        if env_export_dir:
            self.export_dir = os.path.expandvars(os.path.expanduser(env_export_dir))
            print(f"🌍 Using CLUSTER_PLOTTER_EXPORT_DIR from environment: {self.export_dir}")


if __name__ == "__main__":
    # Test configuration when run directly
    config.print_config_summary()
    is_valid, issues = validate_environment()

    if not is_valid:
        print("\n❌ Configuration issues found:")
        for issue in issues:
            print(f"  {issue}")
        print("\nPlease update the paths in config.ini to match your environment.")
    else:
        print("\n✅ Configuration is valid!")
