"""HTML templates for the payment instruction email."""

from string import Template

FONT_IMPORT = (
    "https://fonts.googleapis.com/css2?family=Manrope:wght@600;700;800"
    "&family=Nunito:wght@400;600&display=swap"
)

SUMMARY_ROW = Template(
    '<tr><td style="color: #555; padding: 5px 0; font-family: \'Nunito\', Arial, sans-serif;">$label</td>'
    '<td style="text-align: right; color: #333; font-family: \'Manrope\', Arial, sans-serif; '
    'font-weight: 700;">$value</td></tr>'
)

TOTAL_ROW = Template(
    '<tr style="border-top: 1px solid #e9d8f8;"><td style="color: #333; padding: 10px 0 0 0; '
    'font-weight: 600; font-family: \'Nunito\', Arial, sans-serif; font-size: 16px;">$label</td>'
    '<td style="text-align: right; color: #333; font-family: \'Manrope\', Arial, sans-serif; '
    'font-weight: 800; font-size: 18px; padding: 10px 0 0 0;">$value</td></tr>'
)

INSTRUCTION_ROW = Template(
    '<tr><td style="color: #555; padding: 8px 0; font-family: \'Nunito\', Arial, sans-serif;">$label</td>'
    '<td style="text-align: right; color: #333; font-family: \'Manrope\', Arial, sans-serif; '
    'font-weight: 700;">$value</td></tr>'
)

INSTRUCTION_NOTE = Template(
    '<tr><td colspan="2" style="color: #555; padding: 12px 0 0 0; font-size: 14px; '
    'line-height: 1.6; font-family: \'Nunito\', Arial, sans-serif;">$note</td></tr>'
)

EMAIL_BODY = Template("""<!DOCTYPE html><html><head><meta charset="utf-8">
<style>
    @import url('$font_import');
    body { font-family: 'Nunito', Arial, sans-serif; -webkit-font-smoothing: antialiased; -moz-osx-font-smoothing: grayscale; }
</style>
</head>
<body style="background-color: $background_color; margin: 0; padding: 0;">
    <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%"><tr><td style="padding: 20px 10px;">
        <table align="center" border="0" cellpadding="0" cellspacing="0" width="600" style="max-width: 600px; border-collapse: collapse; background-color: #ffffff; border-radius: 12px; overflow: hidden; box-shadow: 0 4px 15px rgba(0,0,0,0.05);">

            <!-- Header -->
            <tr><td align="center" style="background: $primary_color; padding: 30px 0;">
                <h1 style="color: #ffffff; margin: 0; font-family: 'Manrope', Arial, sans-serif; font-size: 26px; font-weight: 600;">$header_title</h1>
            </td></tr>

            <!-- Main Content -->
            <tr><td style="padding: 30px 30px 40px 30px;">
                <p style="color: #333; margin: 0 0 25px 0; font-size: 16px; line-height: 1.6;">Hello <strong>$name</strong>, please follow the instructions below to complete your payment.</p>

                <!-- Transaction Summary -->
                <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%" style="background-color: #faf7ff; border: 1px solid #e9d8f8; border-radius: 8px; padding: 20px; font-size: 15px;">
                    <tr><td style="padding-bottom: 15px;" colspan="2"><h3 style="margin:0; font-family: 'Manrope', Arial, sans-serif; font-size: 18px; color: $primary_color;">Transaction Summary</h3></td></tr>
                    $summary_rows
                </table>

                <!-- Payment Instructions -->
                <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%" style="margin-top: 25px; background-color: #ffffff; border: 1px solid #e9d8f8; border-radius: 8px; padding: 20px; font-size: 16px;">
                    <tr><td style="padding-bottom: 15px;" colspan="2"><h3 style="margin:0; font-family: 'Manrope', Arial, sans-serif; font-size: 18px; color: $primary_color;">$instructions_title</h3></td></tr>
                    $instruction_rows
                </table>

                <p style="color: #555555; margin: 30px 0 0 0; font-size: 14px; text-align: center; line-height: 1.6;">Your payment will be confirmed and your wallet balance updated within 3-5 business days. Please keep your receipt as proof of payment.</p>
            </td></tr>

            <!-- Footer -->
            <tr><td align="center" style="padding: 0 30px 25px 30px; color: #999999; font-size: 12px;">&copy; $year $brand_name. This is an automated message, please do not reply.</td></tr>
        </table>
    </td></tr></table>
</body></html>
""")
