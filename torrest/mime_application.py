"""Extension to MIME type table for generic ``application/*`` types."""

from __future__ import annotations

from collections.abc import Iterator

_PREFIX = "application/"

# One line per subtype, followed by its extensions, in registration order.
# When an extension appears more than once, the first entry is the one that counts.
_TABLE = """
andrew-inset ez
applixware aw
atom+xml atom
atomcat+xml atomcat
atomsvc+xml atomsvc
ccxml+xml ccxml
cdmi-capability cdmia
cdmi-container cdmic
cdmi-domain cdmid
cdmi-object cdmio
cdmi-queue cdmiq
cu-seeme cu
davmount+xml davmount
docbook+xml dbk
dssc+der dssc
dssc+xml xdssc
ecmascript ecma
emma+xml emma
epub+zip epub
exi exi
font-tdpfr pfr
gml+xml gml
gpx+xml gpx
gxf gxf
hyperstudio stk
inkml+xml ink inkml
ipfix ipfix
java-archive jar
java-serialized-object ser
java-vm class
javascript js
json json
jsonml+json jsonml
lost+xml lostxml
mac-binhex40 hqx
mac-compactpro cpt
mads+xml mads
marc mrc
marcxml+xml mrcx
mathematica ma nb mb
mathml+xml mathml
mbox mbox
mediaservercontrol+xml mscml
metalink+xml metalink
metalink4+xml meta4
mets+xml mets
mods+xml mods
mp21 m21 mp21
mp4 mp4s
msword doc dot
mxf mxf
octet-stream bin dms lrf mar so dist distz pkg bpk dump elc deploy
oda oda
oebps-package+xml opf
ogg ogx
omdoc+xml omdoc
onenote onetoc onetoc2 onetmp onepkg
oxps oxps
patch-ops-error+xml xer
pdf pdf
pgp-encrypted pgp
pgp-signature asc sig
pics-rules prf
pkcs10 p10
pkcs7-mime p7m p7c
pkcs7-signature p7s
pkcs8 p8
pkix-attr-cert ac
pkix-cert cer
pkix-crl crl
pkix-pkipath pkipath
pkixcmp pki
pls+xml pls
postscript ai eps ps
prs.cww cww
pskc+xml pskcxml
rdf+xml rdf
reginfo+xml rif
relax-ng-compact-syntax rnc
resource-lists+xml rl
resource-lists-diff+xml rld
rls-services+xml rs
rpki-ghostbusters gbr
rpki-manifest mft
rpki-roa roa
rsd+xml rsd
rss+xml rss
rtf rtf
sbml+xml sbml
scvp-cv-request scq
scvp-cv-response scs
scvp-vp-request spq
scvp-vp-response spp
sdp sdp
set-payment-initiation setpay
set-registration-initiation setreg
shf+xml shf
smil+xml smi smil
sparql-query rq
sparql-results+xml srx
srgs gram
srgs+xml grxml
sru+xml sru
ssdl+xml ssdl
ssml+xml ssml
tei+xml tei teicorpus
thraud+xml tfi
timestamped-data tsd
voicexml+xml vxml
widget wgt
winhlp hlp
wsdl+xml wsdl
wspolicy+xml wspolicy
x-7z-compressed 7z
x-abiword abw
x-ace-compressed ace
x-apple-diskimage dmg
x-authorware-bin aab x32 u32 vox
x-authorware-map aam
x-authorware-seg aas
x-bcpio bcpio
x-bittorrent torrent
x-blorb blb blorb
x-bzip bz
x-bzip2 bz2 boz
x-cbr cbr cba cbt cbz cb7
x-cdlink vcd
x-cfs-compressed cfs
x-chat chat
x-chess-pgn pgn
x-conference nsc
x-cpio cpio
x-csh csh
x-debian-package deb udeb
x-dgc-compressed dgc
x-director dir dcr dxr cst cct cxt w3d fgd swa
x-doom wad
x-dtbncx+xml ncx
x-dtbook+xml dtb
x-dtbresource+xml res
x-dvi dvi
x-envoy evy
x-eva eva
x-font-bdf bdf
x-font-ghostscript gsf
x-font-linux-psf psf
x-font-pcf pcf
x-font-snf snf
x-font-type1 pfa pfb pfm afm
x-freearc arc
x-futuresplash spl
x-gca-compressed gca
x-glulx ulx
x-gnumeric gnumeric
x-gramps-xml gramps
x-gtar gtar
x-hdf hdf
x-install-instructions install
x-iso9660-image iso
x-java-jnlp-file jnlp
x-latex latex
x-lzh-compressed lzh lha
x-mie mie
x-mobipocket-ebook prc mobi
x-ms-application application
x-ms-shortcut lnk
x-ms-wmd wmd
x-ms-wmz wmz
x-ms-xbap xbap
x-msaccess mdb
x-msbinder obd
x-mscardfile crd
x-msclip clp
x-msdownload exe dll com bat msi
x-msmediaview mvb m13 m14
x-msmetafile wmf wmz emf emz
x-msmoney mny
x-mspublisher pub
x-msschedule scd
x-msterminal trm
x-mswrite wri
x-netcdf nc cdf
x-nzb nzb
x-pkcs12 p12 pfx
x-pkcs7-certificates p7b spc
x-pkcs7-certreqresp p7r
x-rar-compressed rar
x-research-info-systems ris
x-sh sh
x-shar shar
x-shockwave-flash swf
x-silverlight-app xap
x-sql sql
x-stuffit sit
x-stuffitx sitx
x-subrip srt
x-sv4cpio sv4cpio
x-sv4crc sv4crc
x-t3vm-image t3
x-tads gam
x-tar tar
x-tcl tcl
x-tex tex
x-tex-tfm tfm
x-texinfo texinfo texi
x-tgif obj
x-ustar ustar
x-wais-source src
x-x509-ca-cert der crt
x-xfig fig
x-xliff+xml xlf
x-xpinstall xpi
x-xz xz
x-zmachine z1 z2 z3 z4 z5 z6 z7 z8
xaml+xml xaml
xcap-diff+xml xdf
xenc+xml xenc
xhtml+xml xhtml xht
xml xml xsl
xml-dtd dtd
xop+xml xop
xproc+xml xpl
xslt+xml xslt
xspf+xml xspf
xv+xml mxml xhvml xvml xvm
yang yang
yin+xml yin
zip zip
"""


def _entries(table: str) -> Iterator[tuple[str, str]]:
    for line in table.splitlines():
        fields = line.split()
        if not fields:
            continue
        subtype, *extensions = fields
        for extension in extensions:
            yield f".{extension}", _PREFIX + subtype


def _build() -> dict[str, str]:
    table: dict[str, str] = {}
    for extension, mime in _entries(_TABLE):
        table.setdefault(extension, mime)
    return table


_TYPES = _build()


def application_types() -> dict[str, str]:
    """Return a fresh mapping of file extension to generic application MIME type."""
    return dict(_TYPES)