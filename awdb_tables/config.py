from dataclasses import dataclass
import os

@dataclass(frozen=True)
class CoordinateReferenceSystem:
    input: str
    wkt: str

WGS84 = CoordinateReferenceSystem(
    input="EPSG:4326",
    wkt="""GEOGCRS["WGS 84",
    ENSEMBLE["World Geodetic System 1984 ensemble",
        MEMBER["World Geodetic System 1984 (Transit)"],
        MEMBER["World Geodetic System 1984 (G730)"],
        MEMBER["World Geodetic System 1984 (G873)"],
        MEMBER["World Geodetic System 1984 (G1150)"],
        MEMBER["World Geodetic System 1984 (G1674)"],
        MEMBER["World Geodetic System 1984 (G1762)"],
        MEMBER["World Geodetic System 1984 (G2139)"],
        ELLIPSOID["WGS 84",6378137,298.257223563,
            LENGTHUNIT["metre",1]],
        ENSEMBLEACCURACY[2.0]],
    PRIMEM["Greenwich",0,
        ANGLEUNIT["degree",0.0174532925199433]],
    CS[ellipsoidal,2],
        AXIS["geodetic latitude (Lat)",north,
            ORDER[1],
            ANGLEUNIT["degree",0.0174532925199433]],
        AXIS["geodetic longitude (Lon)",east,
            ORDER[2],
            ANGLEUNIT["degree",0.0174532925199433]],
    USAGE[
        SCOPE["Horizontal component of 3D system."],
        AREA["World."],
        BBOX[-90,-180,90,180]],
    ID["EPSG",4326]]""",
)

@dataclass(frozen=True)
class Settings:
    # AWDB
    awdb_base_url: str = os.environ.get("AWDB_BASE_URL", "https://wcc.sc.egov.usda.gov/awdbRestApi/services/v1")
    request_timeout_s: int = int(os.environ.get("REQUEST_TIMEOUT_S", "30"))

    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")
