# logistica

An interactive, menu-driven console system for running a small freight
company. It keeps records of trucks, drivers, clients and trips in data
files in one working directory. It also checks that truck inspections and
driver licences are still valid.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Usage

Start the main menu with:

```
logistica
```

By default the data files are read from and written to the current
directory. To use another directory, pass `--directorio`:

```
logistica --directorio /path/to/data
```

Every menu is answered by typing the number of an option and pressing Enter.
The program ends when you choose `SALIR` or when input runs out.

### Data files

All the files live in the chosen directory:

- `camiones.dat`, `choferes.dat`, `clientes.dat` and `viajes.dat` hold one JSON record per line. They are created when the first record is saved.
- `Ciudades/datos2.bin` is the city table that trip creation searches. It is made of fixed-size binary records: code, province and city name as 50-byte NUL-padded strings, then latitude and longitude as little-endian doubles. The package does not ship this file. You must supply it before you can create a trip.

### Menus

- **Viajes**
  - Create a new trip:
    1. pick a cargo type from a fixed list of 21, then give the weight and volume;
    2. choose one of the drivers that can take the load;
    3. search the origin and destination cities by name and confirm each one; when no name matches exactly, similar names are suggested;
    4. see the estimated time at an average speed of 90 km/h.

    The road distance is taken as 1.2 times the great-circle distance. The trip is then saved as active.
  - List the active trips with the time left to arrival.
  - List the history of finished trips. Trips whose arrival time has passed are closed when either trip list is shown.
- **Choferes**
  - Register and remove drivers.
  - List all drivers, or only those with or without a truck.
  - Assign a truck to a driver, or take it away.
- **Camiones**
  - Register and remove trucks, and renew an expired technical inspection as of today.
  - List all trucks, trucks on a trip, trucks not yet assigned, and trucks from newest to oldest.
  - Show the monthly kilometres and the inspection status.
- **Clientes**
  - Register clients and list them.

Removing a truck or a driver only marks the record inactive; it stays in the file.

A driver can take a trip only when all of these hold:

- the driver is active and has a valid licence;
- the driver is not on a trip;
- the driver has an assigned truck with a valid inspection;
- the truck's maximum weight and volume are both greater than those of the load.

A truck inspection and a driver licence each stay valid until one year after their recorded date. Each time a listing is shown, the stored fit-to-drive flags are brought up to date first.

## Library use

The building blocks can be used directly:

- Record types (dataclasses that raise `ValueError` when a field is set out of range):
  - `logistica.camiones.Camion`;
  - `logistica.choferes.Chofer`;
  - `logistica.clientes.Cliente`;
  - `logistica.viajes.Viaje`;
  - `logistica.fecha.Fecha`;
  - `logistica.ciudades.Ciudad`.
- File stores, one per data file:
  - `logistica.camiones_store.CamionesArchivo`;
  - `logistica.choferes_store.ChoferesArchivo`;
  - `logistica.clientes_store.ClientesArchivo`;
  - `logistica.viajes_store.ViajesArchivo`.

  Each store has `cantidad`, `leer`, `guardar` and `ultimo_id`, and can be iterated. All except the client store also have `modificar`.
- Rule helpers:
  - `logistica.camiones_reports.verificacion_vencida` and `actualizar_verificacion`;
  - `logistica.choferes_reports.licencia_vencida` and `actualizar_licencia`;
  - `logistica.choferes_asignacion.asignar`, `desasignar` and `sincronizar_camiones_asignados`;
  - `logistica.viajes_manager.choferes_disponibles`, `tiempo_estimado`, `calcular_llegada` and `actualizar_estados`.
- City helpers: `logistica.ciudades.leer_ciudades` and `coincidencias`. Distances use the haversine formula through `Ciudad.distancia_a`.

## What it does not do

- Clients cannot be removed or edited. Those menu entries do nothing.
- Drivers cannot be edited. In the driver registration menu, `3. MODIFICAR CHOFER` only refreshes the licence flags, and `4` returns to the previous menu.
- Several driver listings do nothing:
  - `2. LISTAR EN VIAJE`;
  - `5. INFORMAR CANTIDAD DE KM POR CHOFER`;
  - `6. INFORMAR ESTADO DE LICENCIAS`.
- Creating a trip does not mark the driver or the truck as on a trip. It also does not add kilometres to their monthly totals.
- No city data is included.