"""
CLI entry points for invoice PDF generation.
"""

# Standard Library
import argparse
import dataclasses
import json
import pathlib
import time

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.composer
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data
import invoice_pdf_templates.templates


RenderConfig = ipt.config.RenderConfig
TemplateId = ipt.templates.TemplateId


#============================================
def build_config(args: argparse.Namespace, invoice_number: str) -> RenderConfig:
	"""
	Build render config from CLI args.

	Args:
		args: Parsed argparse namespace.
		invoice_number: Used for the document title.

	Returns:
		RenderConfig.
	"""
	return RenderConfig(
		invariant=args.invariant,
		title=f"Invoice {invoice_number}",
		author=args.author,
	)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render invoice JSON to a one-page PDF.")
	parser.add_argument("input_path", nargs="?", default=None, help="Invoice JSON file.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("-s", "--summary", dest="summary_path", default=None, help="Output summary JSON path.")
	output_group.add_argument("-a", "--author", dest="author", default=None, help="PDF author metadata.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument(
		"-t",
		"--template",
		dest="template",
		default=None,
		help="Template override: " + ", ".join(template_id.value for template_id in TemplateId),
	)
	behavior_group.add_argument("-i", "--invariant", dest="invariant", action="store_true", help="Reproducible PDF bytes.")
	behavior_group.add_argument("-I", "--no-invariant", dest="invariant", action="store_false", help="Stamp creation time.")
	behavior_group.add_argument(
		"-l",
		"--list-templates",
		dest="list_templates",
		action="store_true",
		help="List templates and exit.",
	)

	parser.set_defaults(
		invariant=True,
		list_templates=False,
	)

	args = parser.parse_args(argv)
	if args.input_path is None and not args.list_templates:
		parser.error("input_path is required unless --list-templates is given")
	return args


#============================================
def print_templates() -> None:
	for template_id in TemplateId:
		name, description = ipt.templates.TEMPLATE_CATALOG[template_id]
		print(f"{template_id.value:<10} {name}: {description}")


#============================================
def run_pipeline(args: argparse.Namespace) -> dict:
	"""
	Load invoice JSON, render the PDF and write the summary.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Invoice summary mapping.
	"""
	start_time = time.perf_counter()
	input_path = pathlib.Path(args.input_path)
	print(f"Invoice JSON: {input_path}")

	fields = ipt.invoice_data.load_invoice_json(input_path)
	data = ipt.invoice_data.build_invoice_data(fields)
	if args.template is not None:
		data = dataclasses.replace(data, template=args.template)
	template_id = ipt.templates.select_template(data.template)
	print(f"Template: {template_id.value}")
	if data.template != template_id.value:
		print(f"Unknown template {data.template!r}, using {template_id.value}")
	print(f"Line items: {len(data.items)}")

	output_path = args.output_path
	if output_path is None:
		output_path = input_path.parent / ipt.composer.invoice_filename(data)
	output_path = pathlib.Path(output_path)

	render_start = time.perf_counter()
	pdf_bytes = ipt.composer.generate_invoice(data, build_config(args, data.invoice_number))
	render_end = time.perf_counter()
	output_path.write_bytes(pdf_bytes)
	print(f"Output PDF: {output_path} ({len(pdf_bytes)} bytes)")

	summary = ipt.composer.build_invoice_summary(data)
	summary_path = args.summary_path
	if summary_path is None:
		summary_path = f"{output_path}.json"
	with pathlib.Path(summary_path).open("w", encoding="utf-8") as handle:
		json.dump(summary, handle, indent=2, sort_keys=True)
	print(f"Subtotal: {summary['subtotal']} Tax: {summary['tax']} Total: {summary['total']}")
	print(f"Summary written: {summary_path}")

	total_time = time.perf_counter() - start_time
	print(
		"Timing: render={:.2f}s total={:.2f}s".format(
			render_end - render_start,
			total_time,
		)
	)
	return summary


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	if args.list_templates:
		print_templates()
		return
	run_pipeline(args)
